"""Word Guess: hangman-style letter guessing on Turkish words."""

from __future__ import annotations

import random

from config import WORD_GUESS_MAX_ATTEMPTS
from engine.words import WORD_GUESS_WORDS, strip_non_letters, upper_tr
from models.game_state import GameStatus, Player
from models.word_guess import WordGuessState

HIDDEN = "_"


def reveal_pattern(target_word: str, guessed_letters: list[str]) -> list[str]:
    """Show guessed letters of the word and hide the rest."""
    return [char if char in guessed_letters else HIDDEN for char in target_word]


def get_random_word(
    rng: random.Random | None = None,
    words: tuple[str, ...] | list[str] = WORD_GUESS_WORDS,
) -> str:
    rng = rng or random.Random()
    return upper_tr(rng.choice(list(words)))


def start_new_game(
    rng: random.Random | None = None,
    words: tuple[str, ...] | list[str] | None = None,
    max_attempts: int | None = None,
) -> WordGuessState:
    """Pick a word and start with a full set of attempts.

    Raises:
        ValueError: If the word list is empty or attempts are not positive.
    """
    words = WORD_GUESS_WORDS if words is None else words
    max_attempts = WORD_GUESS_MAX_ATTEMPTS if max_attempts is None else max_attempts
    if not words:
        raise ValueError("Word list is empty")
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive")

    target_word = get_random_word(rng, words)
    return WordGuessState(
        board=reveal_pattern(target_word, []),
        target_word=target_word,
        remaining_attempts=max_attempts,
        max_attempts=max_attempts,
    )


def make_guess(state: WordGuessState, letter: str) -> WordGuessState:
    """Guess a single letter.

    Repeated letters and anything that is not exactly one letter are
    ignored. A letter missing from the word costs an attempt.
    """
    if state.is_terminal:
        return state

    letter = upper_tr(letter)
    if len(letter) != 1 or strip_non_letters(letter) != letter:
        return state
    if letter in state.guessed_letters:
        return state

    guessed = [*state.guessed_letters, letter]
    remaining = state.remaining_attempts
    if letter not in state.target_word:
        remaining -= 1

    is_win = all(char in guessed for char in state.target_word)
    is_loss = remaining <= 0

    status = GameStatus.IN_PROGRESS
    if is_win:
        status = GameStatus.WIN
    elif is_loss:
        status = GameStatus.LOSE

    return state.model_copy(update={
        "board": reveal_pattern(state.target_word, guessed),
        "guessed_letters": guessed,
        "remaining_attempts": remaining,
        "status": status,
        "winner": Player.P1 if is_win else None,
    })
