"""Shared state envelope every Playground game conforms to."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

BoardT = TypeVar("BoardT")


class Player(str, Enum):
    """The two seats at the table."""
    P1 = "P1"
    P2 = "P2"

    @property
    def opponent(self) -> "Player":
        return Player.P2 if self is Player.P1 else Player.P1


class GameStatus(str, Enum):
    """Possible states for a game."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"
    LOSE = "lose"


class GameMode(str, Enum):
    """Who sits in the P2 seat."""
    SINGLEPLAYER = "singleplayer"   # P2 is the automatic opponent (if any)
    MULTIPLAYER = "multiplayer"     # P2 is a second human


class GameState(BaseModel, Generic[BoardT]):
    """The common envelope of every game state.

    States are frozen: transitions build a new state with ``model_copy``
    instead of assigning to fields.
    """
    model_config = ConfigDict(frozen=True)

    board: BoardT
    current_player: Player = Player.P1
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Player | None = None
    mode: GameMode | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS
