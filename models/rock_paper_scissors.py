"""Rock-Paper-Scissors state model."""

from enum import Enum
from typing import Literal

from models.game_state import GameMode, GameState, Player


class Move(str, Enum):
    """A hand shape."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


RoundOutcome = Player | Literal["draw"]


class RockPaperScissorsState(GameState[None]):
    """A single round. Moves stay hidden until both are in."""
    board: None = None
    mode: GameMode | None = GameMode.SINGLEPLAYER
    player1_move: Move | None = None
    player2_move: Move | None = None
    round_winner: RoundOutcome | None = None
