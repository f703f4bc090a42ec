"""Battleship state models: boards, ships, setup selection."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode, GameState


class BattleshipPhase(str, Enum):
    """Lifecycle of a Battleship game. Only ever moves forward."""
    SETUP_P1 = "setup_p1"
    SETUP_P2 = "setup_p2"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class CellStatus(str, Enum):
    """Contents of a grid cell, or the result of a shot."""
    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"


class ShipPosition(BaseModel):
    """Origin (top/left cell) and direction of a placed ship."""
    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    orientation: Orientation


class Ship(BaseModel):
    """A ship in a player's fleet."""
    model_config = ConfigDict(frozen=True)

    id: str                         # e.g., "destroyer"
    name: str                       # e.g., "Destroyer"
    size: int
    hits: int = 0
    placed: bool = False
    position: ShipPosition | None = None

    @property
    def is_sunk(self) -> bool:
        return self.hits >= self.size

    def cells(self) -> list[tuple[int, int]]:
        """The (row, col) cells this ship covers, empty if unplaced."""
        if self.position is None:
            return []
        row, col = self.position.row, self.position.col
        if self.position.orientation == Orientation.HORIZONTAL:
            return [(row, col + i) for i in range(self.size)]
        return [(row + i, col) for i in range(self.size)]

    def occupies(self, row: int, col: int) -> bool:
        return (row, col) in self.cells()


Grid = list[list[CellStatus]]


class PlayerBoardState(BaseModel):
    """One side of the table."""
    model_config = ConfigDict(frozen=True)

    grid: Grid                      # Own ships and the damage taken, [row][col]
    ships: list[Ship]
    shots: Grid                     # Shots fired BY this player at the opponent


class SetupSelection(BaseModel):
    """Which ship the placing player is holding, and how it is turned."""
    model_config = ConfigDict(frozen=True)

    selected_ship_id: str | None = None
    orientation: Orientation = Orientation.HORIZONTAL


class BattleshipState(GameState[None]):
    """The full state of a Battleship game."""
    board: None = None
    mode: GameMode | None = GameMode.MULTIPLAYER
    phase: BattleshipPhase = BattleshipPhase.SETUP_P1
    p1: PlayerBoardState
    p2: PlayerBoardState
    last_action_message: str | None = None
    setup: SetupSelection = SetupSelection()
