"""Number Duel: higher/lower guessing against a hidden number."""

from __future__ import annotations

import random

from config import NUMBER_DUEL_MAX, NUMBER_DUEL_MIN
from models.game_state import GameMode, GameStatus
from models.number_duel import Feedback, GuessRecord, NumberDuelState


def start_new_game(
    mode: GameMode = GameMode.SINGLEPLAYER,
    rng: random.Random | None = None,
    min_range: int = NUMBER_DUEL_MIN,
    max_range: int = NUMBER_DUEL_MAX,
) -> NumberDuelState:
    """Pick the hidden number and start with P1 guessing.

    Raises:
        ValueError: If the range is empty.
    """
    if min_range > max_range:
        raise ValueError(f"Invalid range {min_range}-{max_range}")
    rng = rng or random.Random()
    return NumberDuelState(
        mode=mode,
        target_number=rng.randint(min_range, max_range),
        min_range=min_range,
        max_range=max_range,
    )


def compare(guess: int, target: int) -> Feedback:
    if guess == target:
        return Feedback.CORRECT
    if guess < target:
        return Feedback.HIGHER
    return Feedback.LOWER


def make_guess(state: NumberDuelState, guess: int) -> NumberDuelState:
    """Score a guess from the current player.

    Every guess is recorded in the history. A correct guess wins for the
    guesser; in multiplayer a wrong guess passes the turn.
    """
    if state.is_terminal:
        return state

    feedback = compare(guess, state.target_number)
    status = GameStatus.IN_PROGRESS
    winner = None

    if feedback == Feedback.CORRECT:
        status = GameStatus.WIN
        winner = state.current_player

    next_player = state.current_player
    if status == GameStatus.IN_PROGRESS and state.mode == GameMode.MULTIPLAYER:
        next_player = state.current_player.opponent

    record = GuessRecord(player=state.current_player, guess=guess, result=feedback)

    return state.model_copy(update={
        "attempts": state.attempts + 1,
        "last_guess": guess,
        "feedback": feedback,
        "history": [*state.history, record],
        "status": status,
        "winner": winner,
        "current_player": next_player,
    })
