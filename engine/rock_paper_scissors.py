"""Rock-Paper-Scissors: one round, hidden sequential or instant vs. AI."""

from __future__ import annotations

import random

from models.game_state import GameMode, GameStatus, Player
from models.rock_paper_scissors import Move, RockPaperScissorsState, RoundOutcome

# Each move beats the move it maps to
BEATS: dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def start_new_game(mode: GameMode = GameMode.SINGLEPLAYER) -> RockPaperScissorsState:
    """Create a fresh round in the given mode."""
    return RockPaperScissorsState(mode=mode)


def reset_game(mode: GameMode) -> RockPaperScissorsState:
    """Start over, e.g. after the player switches mode."""
    return start_new_game(mode)


def determine_winner(p1: Move, p2: Move) -> RoundOutcome:
    """Resolve two moves by cyclic dominance."""
    if p1 == p2:
        return "draw"
    if BEATS[p1] == p2:
        return Player.P1
    return Player.P2


def random_move(rng: random.Random | None = None) -> Move:
    """Pick the automatic opponent's move uniformly at random."""
    rng = rng or random.Random()
    return rng.choice(list(Move))


def _resolve(
    state: RockPaperScissorsState,
    p1: Move,
    p2: Move,
) -> RockPaperScissorsState:
    outcome = determine_winner(p1, p2)
    return state.model_copy(update={
        "player1_move": p1,
        "player2_move": p2,
        "round_winner": outcome,
        "status": GameStatus.DRAW if outcome == "draw" else GameStatus.WIN,
        "winner": None if outcome == "draw" else outcome,
    })


def make_move(
    state: RockPaperScissorsState,
    move: Move | str,
    rng: random.Random | None = None,
) -> RockPaperScissorsState:
    """Record the current player's move and resolve the round when complete.

    In singleplayer, P1's move is answered immediately by ``random_move``.
    In multiplayer, P1's move is stored and the turn passes to P2; P2's move
    resolves the round.

    Args:
        state: Current game state.
        move: The chosen hand shape (enum or its string value).
        rng: Optional Random instance driving the automatic opponent.

    Returns:
        The next game state. Unknown moves leave ``state`` unchanged.
    """
    if state.is_terminal:
        return state
    try:
        move = Move(move)
    except ValueError:
        return state

    if state.current_player == Player.P1:
        if state.mode == GameMode.SINGLEPLAYER:
            return _resolve(state, move, random_move(rng))
        return state.model_copy(update={
            "player1_move": move,
            "current_player": Player.P2,
        })

    if state.player1_move is None:
        return state
    return _resolve(state, state.player1_move, move)
