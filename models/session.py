"""In-memory play session model."""

import random
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode


class Session(BaseModel):
    """One game being played through the HTTP API."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    game_id: str
    mode: GameMode
    state: Any                      # The game's own GameState subclass
    rng: random.Random              # Drives the automatic opponent, seeded if requested
    created_at: datetime
    actions_applied: int = 0
