"""Tests for Rock-Paper-Scissors resolution in both modes."""

import random

import pytest

from engine.rock_paper_scissors import (
    determine_winner,
    make_move,
    random_move,
    reset_game,
    start_new_game,
)
from models.game_state import GameMode, GameStatus, Player
from models.rock_paper_scissors import Move


class TestDetermineWinner:
    """Tests for determine_winner()."""

    @pytest.mark.parametrize("p1, p2", [
        (Move.ROCK, Move.SCISSORS),
        (Move.SCISSORS, Move.PAPER),
        (Move.PAPER, Move.ROCK),
    ])
    def test_p1_wins(self, p1, p2):
        assert determine_winner(p1, p2) == Player.P1
        assert determine_winner(p2, p1) == Player.P2

    def test_same_move_draws(self):
        for move in Move:
            assert determine_winner(move, move) == "draw"


class TestRandomMove:
    """Tests for random_move()."""

    def test_seeded_determinism(self):
        first = [random_move(random.Random(5)) for _ in range(3)]
        second = [random_move(random.Random(5)) for _ in range(3)]
        assert first == second

    def test_covers_all_moves(self):
        rng = random.Random(1)
        assert {random_move(rng) for _ in range(100)} == set(Move)


class TestSingleplayer:
    """P1 plays against the automatic opponent."""

    def test_resolves_immediately(self):
        rng = random.Random(3)
        expected_ai = random_move(random.Random(3))
        state = make_move(start_new_game(GameMode.SINGLEPLAYER), Move.ROCK, rng=rng)

        assert state.player1_move == Move.ROCK
        assert state.player2_move == expected_ai
        assert state.is_terminal
        assert state.current_player == Player.P1
        outcome = determine_winner(Move.ROCK, expected_ai)
        assert state.round_winner == outcome
        if outcome == "draw":
            assert state.status == GameStatus.DRAW
            assert state.winner is None
        else:
            assert state.status == GameStatus.WIN
            assert state.winner == outcome

    def test_accepts_string_move(self):
        state = make_move(start_new_game(), "paper", rng=random.Random(0))
        assert state.player1_move == Move.PAPER

    def test_unknown_move_is_noop(self):
        state = start_new_game()
        assert make_move(state, "lizard") is state

    def test_terminal_state_absorbs_moves(self):
        state = make_move(start_new_game(), Move.ROCK, rng=random.Random(0))
        assert make_move(state, Move.PAPER) is state


class TestMultiplayer:
    """Two humans take hidden sequential turns."""

    def test_p1_move_passes_turn(self):
        state = make_move(start_new_game(GameMode.MULTIPLAYER), Move.ROCK)
        assert state.player1_move == Move.ROCK
        assert state.player2_move is None
        assert state.current_player == Player.P2
        assert state.status == GameStatus.IN_PROGRESS
        assert state.round_winner is None

    def test_p2_move_resolves(self):
        state = make_move(start_new_game(GameMode.MULTIPLAYER), Move.ROCK)
        state = make_move(state, Move.PAPER)
        assert state.status == GameStatus.WIN
        assert state.winner == Player.P2
        assert state.round_winner == Player.P2

    def test_draw(self):
        state = make_move(start_new_game(GameMode.MULTIPLAYER), Move.SCISSORS)
        state = make_move(state, Move.SCISSORS)
        assert state.status == GameStatus.DRAW
        assert state.winner is None
        assert state.round_winner == "draw"

    def test_single_round_is_the_game(self):
        state = make_move(start_new_game(GameMode.MULTIPLAYER), Move.ROCK)
        state = make_move(state, Move.SCISSORS)
        assert make_move(state, Move.PAPER) is state


class TestResetGame:
    """Tests for reset_game()."""

    def test_fresh_state_in_mode(self):
        state = reset_game(GameMode.MULTIPLAYER)
        assert state.mode == GameMode.MULTIPLAYER
        assert state.player1_move is None
        assert state.status == GameStatus.IN_PROGRESS
