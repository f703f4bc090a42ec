"""Connect-Four state model."""

from models.game_state import GameMode, GameState, Player

CellValue = Player | None


class ConnectFourState(GameState[list[list[CellValue]]]):
    """A rows x cols grid indexed ``board[row][col]``; row 0 is the top."""
    mode: GameMode | None = GameMode.MULTIPLAYER
