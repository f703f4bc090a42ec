"""Battleship: ship placement, setup phases, firing and sinking."""

from __future__ import annotations

from config import BATTLESHIP_GRID_SIZE
from models.battleship import (
    BattleshipPhase,
    BattleshipState,
    CellStatus,
    Grid,
    Orientation,
    PlayerBoardState,
    SetupSelection,
    Ship,
    ShipPosition,
)
from models.game_state import GameStatus, Player

GRID_SIZE = BATTLESHIP_GRID_SIZE

# (id, name, size)
DEFAULT_FLEET: tuple[tuple[str, str, int], ...] = (
    ("carrier", "Carrier", 4),
    ("battleship", "Battleship", 3),
    ("cruiser", "Cruiser", 3),
    ("destroyer", "Destroyer", 2),
    ("submarine", "Submarine", 2),
)

_SETUP_PHASES = (BattleshipPhase.SETUP_P1, BattleshipPhase.SETUP_P2)


def create_grid(size: int = GRID_SIZE) -> Grid:
    """Initialize an empty square grid indexed as grid[row][col]."""
    return [[CellStatus.EMPTY] * size for _ in range(size)]


def _create_player_board(
    fleet: tuple[tuple[str, str, int], ...] | list[tuple[str, str, int]],
    size: int,
) -> PlayerBoardState:
    return PlayerBoardState(
        grid=create_grid(size),
        ships=[Ship(id=ship_id, name=name, size=ship_size) for ship_id, name, ship_size in fleet],
        shots=create_grid(size),
    )


def start_new_game(
    fleet: list[tuple[str, str, int]] | None = None,
    grid_size: int = GRID_SIZE,
) -> BattleshipState:
    """Create a game in the P1 setup phase.

    Args:
        fleet: Optional (id, name, size) tuples replacing the default fleet.
        grid_size: Side length of each player's grid.

    Returns:
        A fresh BattleshipState.

    Raises:
        ValueError: If a ship cannot fit on the grid or ship ids repeat.
    """
    fleet = list(fleet or DEFAULT_FLEET)
    ids = [ship_id for ship_id, _, _ in fleet]
    if len(ids) != len(set(ids)):
        raise ValueError("Ship ids must be unique")
    if any(size < 1 or size > grid_size for _, _, size in fleet):
        raise ValueError(f"Every ship must fit on a {grid_size}x{grid_size} grid")

    return BattleshipState(
        p1=_create_player_board(fleet, grid_size),
        p2=_create_player_board(fleet, grid_size),
        last_action_message="Player 1: Place your ships!",
    )


def cell_label(row: int, col: int) -> str:
    """Human-readable coordinate, e.g. (0, 0) -> "A1", (1, 2) -> "B3"."""
    return f"{chr(ord('A') + row)}{col + 1}"


def _in_bounds(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def can_place_ship(
    grid: Grid,
    size: int,
    row: int,
    col: int,
    orientation: Orientation,
) -> bool:
    """Check that ``size`` consecutive cells from (row, col) are on the grid and empty.

    Args:
        grid: The placing player's grid.
        size: Ship length.
        row: Origin row.
        col: Origin column.
        orientation: Direction the ship extends from its origin.

    Returns:
        True if the ship fits.
    """
    d_row, d_col = (0, 1) if orientation == Orientation.HORIZONTAL else (1, 0)
    for i in range(size):
        r, c = row + d_row * i, col + d_col * i
        if not _in_bounds(grid, r, c):
            return False
        if grid[r][c] != CellStatus.EMPTY:
            return False
    return True


def _placing_side(state: BattleshipState) -> tuple[str, PlayerBoardState]:
    if state.phase == BattleshipPhase.SETUP_P1:
        return "p1", state.p1
    return "p2", state.p2


def select_ship(state: BattleshipState, ship_id: str) -> BattleshipState:
    """Pick up a ship from the placing player's fleet."""
    if state.phase not in _SETUP_PHASES:
        return state
    _, side = _placing_side(state)
    if not any(ship.id == ship_id for ship in side.ships):
        return state
    return state.model_copy(update={
        "setup": state.setup.model_copy(update={"selected_ship_id": ship_id}),
    })


def toggle_orientation(state: BattleshipState) -> BattleshipState:
    """Flip between horizontal and vertical placement."""
    if state.phase not in _SETUP_PHASES:
        return state
    orientation = (
        Orientation.VERTICAL
        if state.setup.orientation == Orientation.HORIZONTAL
        else Orientation.HORIZONTAL
    )
    return state.model_copy(update={
        "setup": state.setup.model_copy(update={"orientation": orientation}),
    })


def place_ship(
    state: BattleshipState,
    row: int,
    col: int,
    ship_id: str | None = None,
    orientation: Orientation | None = None,
) -> BattleshipState:
    """Place (or move) a ship on the placing player's grid.

    Uses ``ship_id``/``orientation`` when given, else the current setup
    selection. A ship that is already on the grid is lifted first, so
    placing it again moves it.

    Args:
        state: Current game state.
        row: Origin row.
        col: Origin column.
        ship_id: Ship to place; defaults to the selected ship.
        orientation: Direction; defaults to the selected orientation.

    Returns:
        The next game state. Invalid placements only update the message.
    """
    if state.phase not in _SETUP_PHASES:
        return state

    ship_id = ship_id or state.setup.selected_ship_id
    if ship_id is None:
        return state
    try:
        orientation = Orientation(orientation or state.setup.orientation)
    except ValueError:
        return state

    side_key, side = _placing_side(state)
    ship_index = next((i for i, s in enumerate(side.ships) if s.id == ship_id), None)
    if ship_index is None:
        return state
    ship = side.ships[ship_index]

    grid = [list(cells) for cells in side.grid]
    for r, c in ship.cells():
        grid[r][c] = CellStatus.EMPTY

    if not can_place_ship(grid, ship.size, row, col, orientation):
        return state.model_copy(update={"last_action_message": "Invalid placement!"})

    placed = ship.model_copy(update={
        "placed": True,
        "position": ShipPosition(row=row, col=col, orientation=orientation),
    })
    for r, c in placed.cells():
        grid[r][c] = CellStatus.SHIP

    ships = list(side.ships)
    ships[ship_index] = placed

    return state.model_copy(update={
        side_key: side.model_copy(update={"grid": grid, "ships": ships}),
        "last_action_message": None,
    })


def finish_setup(state: BattleshipState) -> BattleshipState:
    """Lock in the placing player's fleet and advance the phase.

    Rejected with a message while any ship of the placing side is unplaced.
    """
    if state.phase not in _SETUP_PHASES:
        return state

    _, side = _placing_side(state)
    if any(not ship.placed for ship in side.ships):
        return state.model_copy(update={"last_action_message": "Place all ships first!"})

    if state.phase == BattleshipPhase.SETUP_P1:
        return state.model_copy(update={
            "phase": BattleshipPhase.SETUP_P2,
            "current_player": Player.P2,
            "last_action_message": "Player 2: Place your ships!",
            "setup": SetupSelection(),
        })

    return state.model_copy(update={
        "phase": BattleshipPhase.IN_PROGRESS,
        "current_player": Player.P1,
        "last_action_message": "Game Started! Player 1 turn.",
    })


# ---------------------------------------------------------------------------
# Gameplay
# ---------------------------------------------------------------------------


def all_ships_sunk(ships: list[Ship]) -> bool:
    return all(ship.is_sunk for ship in ships)


def fire_shot(state: BattleshipState, row: int, col: int) -> BattleshipState:
    """Fire the current player's shot at (row, col) on the opponent's grid.

    Hit or miss is read from the defender's ship grid. A hit damages the
    ship covering that cell; when the defender's whole fleet is sunk the
    attacker wins. The turn passes after every shot, the winning one
    included.

    Args:
        state: Current game state.
        row: Target row.
        col: Target column.

    Returns:
        The next game state.
    """
    if state.phase != BattleshipPhase.IN_PROGRESS:
        return state

    attacker = state.current_player
    attacker_key, defender_key = ("p1", "p2") if attacker == Player.P1 else ("p2", "p1")
    shooter: PlayerBoardState = getattr(state, attacker_key)
    target: PlayerBoardState = getattr(state, defender_key)

    if not _in_bounds(shooter.shots, row, col):
        return state.model_copy(update={"last_action_message": "Invalid target!"})
    if shooter.shots[row][col] != CellStatus.EMPTY:
        return state.model_copy(update={"last_action_message": "Already shot there!"})

    is_hit = target.grid[row][col] == CellStatus.SHIP
    label = cell_label(row, col)

    shots = [list(cells) for cells in shooter.shots]
    shots[row][col] = CellStatus.HIT if is_hit else CellStatus.MISS

    grid = target.grid
    ships = target.ships
    message = f"{attacker.value} missed at {label}."

    if is_hit:
        message = f"{attacker.value} hit a ship at {label}!"
        grid = [list(cells) for cells in target.grid]
        grid[row][col] = CellStatus.HIT

        ships = []
        for ship in target.ships:
            if ship.occupies(row, col):
                ship = ship.model_copy(update={"hits": ship.hits + 1})
                if ship.is_sunk:
                    message = f"{attacker.value} sunk {attacker.opponent.value}'s {ship.name}!"
            ships.append(ship)

    update = {
        attacker_key: shooter.model_copy(update={"shots": shots}),
        defender_key: target.model_copy(update={"grid": grid, "ships": ships}),
        "current_player": attacker.opponent,
    }

    if all_ships_sunk(ships):
        message = f"{attacker.value} wins! All enemy ships sunk."
        update.update({
            "phase": BattleshipPhase.FINISHED,
            "status": GameStatus.WIN,
            "winner": attacker,
        })

    update["last_action_message"] = message
    return state.model_copy(update=update)
