"""Number Duel state models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode, GameState, Player


class Feedback(str, Enum):
    """Hint given after a guess, relative to the guess."""
    HIGHER = "higher"               # Target is higher than the guess
    LOWER = "lower"                 # Target is lower than the guess
    CORRECT = "correct"


class GuessRecord(BaseModel):
    """One entry of the guess history."""
    model_config = ConfigDict(frozen=True)

    player: Player
    guess: int
    result: Feedback


class NumberDuelState(GameState[None]):
    """Players take turns homing in on a hidden number."""
    board: None = None
    mode: GameMode | None = GameMode.SINGLEPLAYER
    target_number: int
    min_range: int
    max_range: int
    attempts: int = 0
    last_guess: int | None = None
    feedback: Feedback | None = None
    history: list[GuessRecord] = []
