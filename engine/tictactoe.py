"""Tic-Tac-Toe: line scanning and move resolution."""

from __future__ import annotations

from config import TICTACTOE_SIZE
from models.game_state import GameStatus, Player
from models.tictactoe import CellValue, TicTacToeState

CELL_COUNT = TICTACTOE_SIZE * TICTACTOE_SIZE

WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # Rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # Cols
    (0, 4, 8), (2, 4, 6),             # Diagonals
)


def start_new_game() -> TicTacToeState:
    """Create an empty board with P1 to move."""
    return TicTacToeState(board=[None] * CELL_COUNT)


def check_winner(board: list[CellValue]) -> Player | None:
    """Return the player owning every cell of some line, if any.

    Args:
        board: The 9 cells, row-major.

    Returns:
        The winning player, or None.
    """
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
    return None


def check_draw(board: list[CellValue]) -> bool:
    """True when no empty cell remains."""
    return all(cell is not None for cell in board)


def make_move(state: TicTacToeState, index: int) -> TicTacToeState:
    """Place the current player's mark at ``index``.

    Occupied or out-of-range cells, and moves after the game has ended,
    return ``state`` unchanged.

    Args:
        state: Current game state.
        index: Cell index 0-8, row-major.

    Returns:
        The next game state.
    """
    if state.is_terminal:
        return state
    if not 0 <= index < len(state.board) or state.board[index] is not None:
        return state

    board = list(state.board)
    board[index] = state.current_player

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
