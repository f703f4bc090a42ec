"""Wordle state models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode, GameState


class LetterFeedback(str, Enum):
    """Colour of a tile after a guess is scored."""
    CORRECT = "correct"             # Right letter, right spot
    PRESENT = "present"             # In the word, elsewhere
    ABSENT = "absent"
    EMPTY = "empty"                 # Not yet scored


class WordleLetter(BaseModel):
    """A single scored tile."""
    model_config = ConfigDict(frozen=True)

    char: str
    feedback: LetterFeedback


GuessRow = list[WordleLetter]


class WordleState(GameState[None]):
    """Six tries to find a Turkish word."""
    board: None = None
    mode: GameMode | None = GameMode.SINGLEPLAYER
    target_word: str
    guesses: list[GuessRow] = []
    max_attempts: int
    current_attempt_index: int = 0
    word_length: int
    current_guess: str = ""         # Typed but not yet submitted
    error_message: str | None = None
