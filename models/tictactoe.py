"""Tic-Tac-Toe state model."""

from models.game_state import GameMode, GameState, Player

CellValue = Player | None


class TicTacToeState(GameState[list[CellValue]]):
    """A 3x3 board stored row-major as 9 cells."""
    mode: GameMode | None = GameMode.MULTIPLAYER
