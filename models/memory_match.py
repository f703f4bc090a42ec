"""Memory Match state models."""

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode, GameState


class Card(BaseModel):
    """A face-down or face-up card. Every value appears exactly twice."""
    model_config = ConfigDict(frozen=True)

    id: str                         # Board position, e.g. "card-3"
    value: str                      # Emoji or text shown when face-up
    is_flipped: bool = False
    is_matched: bool = False


class MemoryMatchState(GameState[list[Card]]):
    """Shuffled deck plus the (at most two) cards currently face-up."""
    mode: GameMode | None = GameMode.SINGLEPLAYER
    flipped_indices: list[int] = []
    moves_count: int = 0
