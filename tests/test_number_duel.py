"""Tests for Number Duel guessing and turn order."""

import random

import pytest

from engine.number_duel import compare, make_guess, start_new_game
from models.game_state import GameMode, GameStatus, Player
from models.number_duel import Feedback, NumberDuelState


def _make_state(target: int = 42, mode: GameMode = GameMode.SINGLEPLAYER) -> NumberDuelState:
    """Helper: a game with a known target."""
    return NumberDuelState(mode=mode, target_number=target, min_range=1, max_range=100)


class TestStartNewGame:
    """Tests for start_new_game()."""

    def test_target_in_range(self):
        rng = random.Random(4)
        for _ in range(50):
            state = start_new_game(rng=rng)
            assert 1 <= state.target_number <= 100

    def test_seeded_determinism(self):
        a = start_new_game(rng=random.Random(8))
        b = start_new_game(rng=random.Random(8))
        assert a.target_number == b.target_number

    def test_custom_range(self):
        state = start_new_game(rng=random.Random(0), min_range=5, max_range=5)
        assert state.target_number == 5

    def test_empty_range_rejected(self):
        with pytest.raises(ValueError):
            start_new_game(min_range=10, max_range=1)


class TestCompare:
    """Tests for compare()."""

    def test_feedback(self):
        assert compare(10, 42) == Feedback.HIGHER
        assert compare(50, 42) == Feedback.LOWER
        assert compare(42, 42) == Feedback.CORRECT


class TestMakeGuess:
    """Tests for make_guess()."""

    def test_wrong_guess_recorded(self):
        state = make_guess(_make_state(), 10)
        assert state.feedback == Feedback.HIGHER
        assert state.last_guess == 10
        assert state.attempts == 1
        assert state.history[0].player == Player.P1
        assert state.history[0].result == Feedback.HIGHER
        assert state.status == GameStatus.IN_PROGRESS

    def test_singleplayer_keeps_turn(self):
        state = make_guess(_make_state(), 10)
        assert state.current_player == Player.P1

    def test_multiplayer_alternates(self):
        state = make_guess(_make_state(mode=GameMode.MULTIPLAYER), 10)
        assert state.current_player == Player.P2
        state = make_guess(state, 90)
        assert state.current_player == Player.P1
        assert [h.player for h in state.history] == [Player.P1, Player.P2]

    def test_correct_guess_wins_for_guesser(self):
        state = make_guess(_make_state(mode=GameMode.MULTIPLAYER), 10)
        state = make_guess(state, 42)
        assert state.status == GameStatus.WIN
        assert state.winner == Player.P2
        assert state.current_player == Player.P2
        assert state.feedback == Feedback.CORRECT
        assert len(state.history) == 2

    def test_finished_game_absorbs_guesses(self):
        state = make_guess(_make_state(), 42)
        assert make_guess(state, 1) is state
