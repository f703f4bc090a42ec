"""Geo Quiz state models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from models.game_state import GameMode, GameState


class Location(BaseModel):
    """A city photo with four multiple-choice answers."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str                       # The correct answer
    image: str                      # URL or local asset key
    options: list[str]


class GeoQuizState(GameState[None]):
    """A fixed number of rounds; one point per correct answer."""
    board: None = None
    mode: GameMode | None = GameMode.SINGLEPLAYER
    current_location: Location
    score: int = 0
    round: int = 1                  # 1-based; exceeds total_rounds when finished
    total_rounds: int
    last_result: Literal["correct", "wrong"] | None = None
    deck: list[Location]            # Location for each round, drawn at start
