"""Connect-Four: gravity drops and 4-in-a-row detection."""

from __future__ import annotations

from config import CONNECT_FOUR_COLS, CONNECT_FOUR_ROWS, CONNECT_FOUR_RUN
from models.connect_four import CellValue, ConnectFourState
from models.game_state import GameStatus, Player

ROWS = CONNECT_FOUR_ROWS
COLS = CONNECT_FOUR_COLS

# (row step, col step) for horizontal, vertical, down-right, up-right runs
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


def create_board(rows: int = ROWS, cols: int = COLS) -> list[list[CellValue]]:
    """Initialize an empty grid indexed as board[row][col]."""
    return [[None] * cols for _ in range(rows)]


def start_new_game() -> ConnectFourState:
    """Create an empty 6x7 board with P1 to move."""
    return ConnectFourState(board=create_board())


def _owns_run(
    board: list[list[CellValue]],
    row: int,
    col: int,
    d_row: int,
    d_col: int,
) -> Player | None:
    """Return the owner of the run starting at (row, col), if complete."""
    first = board[row][col]
    if first is None:
        return None
    for step in range(1, CONNECT_FOUR_RUN):
        r, c = row + d_row * step, col + d_col * step
        if not (0 <= r < len(board) and 0 <= c < len(board[0])):
            return None
        if board[r][c] != first:
            return None
    return first


def check_winner(board: list[list[CellValue]]) -> Player | None:
    """Scan every horizontal, vertical and diagonal run of four.

    Args:
        board: The grid, row 0 at the top.

    Returns:
        The first player found owning a full run, or None.
    """
    for d_row, d_col in _DIRECTIONS:
        for row in range(len(board)):
            for col in range(len(board[0])):
                owner = _owns_run(board, row, col, d_row, d_col)
                if owner is not None:
                    return owner
    return None


def check_draw(board: list[list[CellValue]]) -> bool:
    """True when the top row is full (pieces stack, so the board is full)."""
    return all(cell is not None for cell in board[0])


def lowest_empty_row(board: list[list[CellValue]], column: int) -> int | None:
    """Find the row a piece dropped into ``column`` would land in.

    Returns:
        The row index, or None if the column is full or out of range.
    """
    if not board or not 0 <= column < len(board[0]):
        return None
    for row in range(len(board) - 1, -1, -1):
        if board[row][column] is None:
            return row
    return None


def make_move(state: ConnectFourState, column: int) -> ConnectFourState:
    """Drop the current player's piece into ``column``.

    A full or out-of-range column is a no-op and does not pass the turn.

    Args:
        state: Current game state.
        column: Column index 0-6.

    Returns:
        The next game state.
    """
    if state.is_terminal:
        return state

    row = lowest_empty_row(state.board, column)
    if row is None:
        return state

    board = [list(cells) for cells in state.board]
    board[row][column] = state.current_player

    winner = check_winner(board)
    status = GameStatus.IN_PROGRESS
    next_player = state.current_player

    if winner:
        status = GameStatus.WIN
    elif check_draw(board):
        status = GameStatus.DRAW
    else:
        next_player = state.current_player.opponent

    return state.model_copy(update={
        "board": board,
        "current_player": next_player,
        "status": status,
        "winner": winner,
    })
