"""Tests for Wordle scoring, validation and game flow."""

import random

import pytest

from engine.wordle import (
    ERROR_UNKNOWN_WORD,
    ERROR_WRONG_LENGTH,
    evaluate_guess,
    init_game,
    is_valid_word,
    keyboard_status,
    submit_guess,
    update_current_guess,
)
from engine.words import WORDLE_TARGET_WORDS, upper_tr
from models.game_state import GameStatus, Player
from models.wordle import LetterFeedback, WordleState

CORRECT = LetterFeedback.CORRECT
PRESENT = LetterFeedback.PRESENT
ABSENT = LetterFeedback.ABSENT


def _make_state(target: str = "ELMAS", max_attempts: int = 6) -> WordleState:
    """Helper: a game with a known target word."""
    return WordleState(
        target_word=target,
        max_attempts=max_attempts,
        word_length=len(target),
    )


def _marks(target: str, guess: str) -> list[LetterFeedback]:
    return [tile.feedback for tile in evaluate_guess(target, guess)]


class TestUpperTr:
    """Tests for Turkish uppercasing."""

    def test_dotted_and_dotless_i(self):
        assert upper_tr("kitap") == "KİTAP"
        assert upper_tr("balık") == "BALIK"
        assert upper_tr("çiçek") == "ÇİÇEK"


class TestEvaluateGuess:
    """Tests for evaluate_guess()."""

    def test_exact_match(self):
        assert _marks("ELMAS", "ELMAS") == [CORRECT] * 5

    def test_duplicates_never_over_credited(self):
        """ALMA has two A's, so MAMA earns exactly two A marks."""
        row = evaluate_guess("ALMA", "MAMA")
        assert [tile.feedback for tile in row] == [ABSENT, PRESENT, CORRECT, CORRECT]
        a_marks = [t for t in row if t.char == "A" and t.feedback != ABSENT]
        assert len(a_marks) == "ALMA".count("A")

    def test_single_target_letter_guessed_twice(self):
        assert _marks("ELMAS", "KALMA") == [ABSENT, PRESENT, PRESENT, PRESENT, ABSENT]

    def test_exact_match_takes_priority_over_present(self):
        """Both A's of BAHAR are claimed by exact matches; extra A's are absent."""
        assert _marks("BAHAR", "AAAAA") == [ABSENT, CORRECT, ABSENT, CORRECT, ABSENT]

    def test_case_insensitive(self):
        assert _marks("KİTAP", "kitap") == [CORRECT] * 5

    def test_chars_are_uppercased(self):
        row = evaluate_guess("ELMAS", "elmas")
        assert "".join(tile.char for tile in row) == "ELMAS"


class TestIsValidWord:
    """Tests for is_valid_word()."""

    def test_known_word(self):
        assert is_valid_word("ELMAS", 5)
        assert is_valid_word("elmas", 5)

    def test_wrong_length(self):
        assert not is_valid_word("ELMAS", 4)

    def test_unknown_word(self):
        assert not is_valid_word("QQQQQ", 5)


class TestInitGame:
    """Tests for init_game()."""

    def test_defaults(self):
        state = init_game(rng=random.Random(1))
        assert state.word_length == 5
        assert state.max_attempts == 6
        assert state.target_word in WORDLE_TARGET_WORDS
        assert len(state.target_word) == 5

    def test_other_length(self):
        state = init_game(word_length=4, rng=random.Random(1))
        assert len(state.target_word) == 4

    def test_unavailable_length(self):
        with pytest.raises(ValueError):
            init_game(word_length=12)


class TestUpdateCurrentGuess:
    """Tests for update_current_guess()."""

    def test_cleans_and_uppercases(self):
        state = update_current_guess(_make_state(), "el1m")
        assert state.current_guess == "ELM"

    def test_too_long_is_noop(self):
        state = _make_state()
        assert update_current_guess(state, "elmaslar") is state

    def test_clears_error(self):
        state = submit_guess(_make_state(), "ELM")
        assert state.error_message == ERROR_WRONG_LENGTH
        state = update_current_guess(state, "ELMA")
        assert state.error_message is None


class TestSubmitGuess:
    """Tests for submit_guess()."""

    def test_wrong_length_does_not_use_attempt(self):
        state = submit_guess(_make_state(), "ELMA")
        assert state.error_message == ERROR_WRONG_LENGTH
        assert state.guesses == []
        assert state.current_attempt_index == 0

    def test_unknown_word_does_not_use_attempt(self):
        state = submit_guess(_make_state(), "QQQQQ")
        assert state.error_message == ERROR_UNKNOWN_WORD
        assert state.current_attempt_index == 0

    def test_rejection_is_idempotent(self):
        once = submit_guess(_make_state(), "QQQQQ")
        assert submit_guess(once, "QQQQQ") == once

    def test_uses_buffered_guess(self):
        state = update_current_guess(_make_state(), "kalem")
        state = submit_guess(state)
        assert len(state.guesses) == 1
        assert state.current_guess == ""
        assert state.current_attempt_index == 1
        assert state.status == GameStatus.IN_PROGRESS

    def test_win(self):
        state = submit_guess(_make_state(), "elmas")
        assert state.status == GameStatus.WIN
        assert state.winner == Player.P1
        assert [t.feedback for t in state.guesses[0]] == [CORRECT] * 5

    def test_lose_after_max_attempts(self):
        state = _make_state(max_attempts=2)
        state = submit_guess(state, "KALEM")
        assert state.status == GameStatus.IN_PROGRESS
        state = submit_guess(state, "MASAL")
        assert state.status == GameStatus.LOSE
        assert state.winner is None
        assert submit_guess(state, "ELMAS") is state
        assert update_current_guess(state, "E") is state


class TestKeyboardStatus:
    """Tests for keyboard_status()."""

    def test_best_feedback_wins(self):
        state = submit_guess(_make_state(), "KALMA")
        state = submit_guess(state, "ATLAS")
        status = keyboard_status(state)
        assert status["K"] == ABSENT
        assert status["S"] == CORRECT
        assert status["A"] == CORRECT
        assert status["L"] == PRESENT
        assert "E" not in status
