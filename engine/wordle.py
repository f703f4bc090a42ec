"""Wordle: duplicate-aware tile scoring against a Turkish dictionary."""

from __future__ import annotations

import random

from config import WORDLE_MAX_ATTEMPTS, WORDLE_WORD_LENGTH
from engine.words import (
    WORDLE_ALLOWED_WORDS,
    WORDLE_TARGET_WORDS,
    strip_non_letters,
    upper_tr,
)
from models.game_state import GameStatus, Player
from models.wordle import GuessRow, LetterFeedback, WordleLetter, WordleState

ERROR_WRONG_LENGTH = "Kelime çok kısa"
ERROR_UNKNOWN_WORD = "Geçersiz kelime"

# Higher wins when the same letter was scored differently in two guesses
_FEEDBACK_RANK = {
    LetterFeedback.EMPTY: 0,
    LetterFeedback.ABSENT: 1,
    LetterFeedback.PRESENT: 2,
    LetterFeedback.CORRECT: 3,
}


def init_game(
    word_length: int = WORDLE_WORD_LENGTH,
    max_attempts: int = WORDLE_MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> WordleState:
    """Pick a target word of ``word_length`` letters.

    Raises:
        ValueError: If no target word has that length or attempts are not positive.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive")
    candidates = [word for word in WORDLE_TARGET_WORDS if len(word) == word_length]
    if not candidates:
        raise ValueError(f"No {word_length}-letter target words available")

    rng = rng or random.Random()
    return WordleState(
        target_word=upper_tr(rng.choice(candidates)),
        max_attempts=max_attempts,
        word_length=word_length,
    )


def is_valid_word(word: str, word_length: int) -> bool:
    """True if ``word`` has the right length and is in the dictionary."""
    return len(word) == word_length and upper_tr(word) in WORDLE_ALLOWED_WORDS


def evaluate_guess(target: str, guess: str) -> GuessRow:
    """Score every tile of ``guess`` against ``target``.

    Exact matches are marked first and each consumes its letter from the
    pool of unmatched target letters. Remaining tiles are ``present`` only
    while an unconsumed copy of the letter is left, so a letter is never
    credited more times than it occurs in the target.

    Args:
        target: The hidden word.
        guess: The submitted word, same length as ``target``.

    Returns:
        One WordleLetter per position of ``guess``.
    """
    target_letters = list(upper_tr(target))
    guess_letters = list(upper_tr(guess))
    feedback: list[LetterFeedback | None] = [None] * len(guess_letters)
    available: list[str | None] = list(target_letters)

    for i, char in enumerate(guess_letters):
        if i < len(target_letters) and char == target_letters[i]:
            feedback[i] = LetterFeedback.CORRECT
            available[i] = None

    for i, char in enumerate(guess_letters):
        if feedback[i] is not None:
            continue
        if char in available:
            feedback[i] = LetterFeedback.PRESENT
            available[available.index(char)] = None
        else:
            feedback[i] = LetterFeedback.ABSENT

    return [
        WordleLetter(char=char, feedback=mark)
        for char, mark in zip(guess_letters, feedback)
    ]


def update_current_guess(state: WordleState, text: str) -> WordleState:
    """Replace the typed-but-unsubmitted guess.

    Non-letters are dropped and the rest uppercased; input longer than the
    word is rejected.
    """
    if state.is_terminal:
        return state
    cleaned = upper_tr(strip_non_letters(text))
    if len(cleaned) > state.word_length:
        return state
    return state.model_copy(update={
        "current_guess": cleaned,
        "error_message": None,
    })


def submit_guess(state: WordleState, guess: str | None = None) -> WordleState:
    """Score a guess, either ``guess`` or the buffered ``current_guess``.

    Guesses of the wrong length or outside the dictionary only set
    ``error_message`` and do not use up an attempt.
    """
    if state.is_terminal:
        return state

    word = upper_tr(state.current_guess if guess is None else guess)

    if len(word) != state.word_length:
        return state.model_copy(update={"error_message": ERROR_WRONG_LENGTH})
    if not is_valid_word(word, state.word_length):
        return state.model_copy(update={"error_message": ERROR_UNKNOWN_WORD})

    guesses = [*state.guesses, evaluate_guess(state.target_word, word)]
    is_win = word == state.target_word
    is_loss = not is_win and len(guesses) >= state.max_attempts

    status = GameStatus.IN_PROGRESS
    if is_win:
        status = GameStatus.WIN
    elif is_loss:
        status = GameStatus.LOSE

    return state.model_copy(update={
        "guesses": guesses,
        "current_attempt_index": state.current_attempt_index + 1,
        "status": status,
        "current_guess": "",
        "error_message": None,
        "winner": Player.P1 if is_win else None,
    })


def keyboard_status(state: WordleState) -> dict[str, LetterFeedback]:
    """Best feedback seen so far for every guessed letter."""
    status: dict[str, LetterFeedback] = {}
    for row in state.guesses:
        for tile in row:
            current = status.get(tile.char, LetterFeedback.EMPTY)
            if _FEEDBACK_RANK[tile.feedback] > _FEEDBACK_RANK[current]:
                status[tile.char] = tile.feedback
    return status
