"""Geo Quiz: name the city in the photo."""

from __future__ import annotations

import random

from config import GEO_QUIZ_TOTAL_ROUNDS
from models.game_state import GameStatus, Player
from models.geo_quiz import GeoQuizState, Location

_UNSPLASH = "https://images.unsplash.com/{}?q=80&w=1000&auto=format&fit=crop"

LOCATIONS: tuple[Location, ...] = (
    Location(
        id="1",
        name="Paris",
        image=_UNSPLASH.format("photo-1502602898657-3e91760cbb34"),
        options=["London", "Paris", "Berlin", "Madrid"],
    ),
    Location(
        id="2",
        name="New York",
        image=_UNSPLASH.format("photo-1496442226666-8d4d0e62e6e9"),
        options=["Chicago", "New York", "Toronto", "Sydney"],
    ),
    Location(
        id="3",
        name="Tokyo",
        image=_UNSPLASH.format("photo-1503899036084-c55cdd92da26"),
        options=["Seoul", "Beijing", "Tokyo", "Bangkok"],
    ),
    Location(
        id="4",
        name="Sydney",
        image=_UNSPLASH.format("photo-1506973035872-a4ec16b8e8d9"),
        options=["Melbourne", "Sydney", "Auckland", "Vancouver"],
    ),
    Location(
        id="5",
        name="Rome",
        image=_UNSPLASH.format("photo-1552832230-c0197dd311b5"),
        options=["Rome", "Athens", "Istanbul", "Cairo"],
    ),
)


def build_deck(
    locations: tuple[Location, ...] | list[Location],
    rounds: int,
    rng: random.Random,
) -> list[Location]:
    """Draw ``rounds`` locations, reshuffling the pool each time it runs out."""
    deck: list[Location] = []
    while len(deck) < rounds:
        pool = list(locations)
        rng.shuffle(pool)
        deck.extend(pool)
    return deck[:rounds]


def start_new_game(
    rng: random.Random | None = None,
    locations: tuple[Location, ...] | list[Location] | None = None,
    total_rounds: int | None = None,
) -> GeoQuizState:
    """Shuffle the locations and show the first one.

    Raises:
        ValueError: If there are no locations or no rounds to play.
    """
    rng = rng or random.Random()
    locations = LOCATIONS if locations is None else locations
    total_rounds = GEO_QUIZ_TOTAL_ROUNDS if total_rounds is None else total_rounds
    if not locations or total_rounds < 1:
        raise ValueError("Geo Quiz needs at least one location and one round")

    deck = build_deck(locations, total_rounds, rng)
    return GeoQuizState(
        current_location=deck[0],
        total_rounds=total_rounds,
        deck=deck,
    )


def make_guess(state: GeoQuizState, choice: str) -> GeoQuizState:
    """Score the chosen city name and move on to the next round.

    After the last round the game is finished; the single player is
    recorded as the winner whatever the score.
    """
    if state.is_terminal:
        return state

    is_correct = choice == state.current_location.name
    next_round = state.round + 1
    finished = next_round > state.total_rounds

    update = {
        "score": state.score + 1 if is_correct else state.score,
        "round": next_round,
        "last_result": "correct" if is_correct else "wrong",
    }
    if finished:
        update.update({"status": GameStatus.WIN, "winner": Player.P1})
    else:
        update["current_location"] = state.deck[next_round - 1]

    return state.model_copy(update=update)
