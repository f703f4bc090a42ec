"""Word Guess (hangman) state model."""

from models.game_state import GameMode, GameState


class WordGuessState(GameState[list[str]]):
    """Guess the hidden word one letter at a time.

    ``board`` is the revealed pattern, one entry per letter of the word,
    with ``"_"`` for letters not yet guessed.
    """
    mode: GameMode | None = GameMode.SINGLEPLAYER
    target_word: str
    guessed_letters: list[str] = []
    remaining_attempts: int
    max_attempts: int
