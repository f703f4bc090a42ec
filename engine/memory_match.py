"""Memory Match: flip two cards, keep pairs, clear the board."""

from __future__ import annotations

import random

from models.game_state import GameStatus, Player
from models.memory_match import Card, MemoryMatchState

EMOJIS: tuple[str, ...] = ("🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼")


def shuffle_cards(
    rng: random.Random | None = None,
    values: tuple[str, ...] | list[str] = EMOJIS,
) -> list[Card]:
    """Build one pair of cards per value and shuffle them.

    Args:
        rng: Optional Random instance for seeded/testing shuffles.
        values: Face values; each yields two cards.

    Returns:
        The shuffled deck.
    """
    rng = rng or random.Random()
    faces = [value for value in values for _ in range(2)]
    rng.shuffle(faces)
    # Ids follow board position so they say nothing about pairs
    return [Card(id=f"card-{position}", value=value) for position, value in enumerate(faces)]


def start_new_game(
    rng: random.Random | None = None,
    values: tuple[str, ...] | list[str] | None = None,
) -> MemoryMatchState:
    """Deal a fresh shuffled board."""
    values = EMOJIS if values is None else values
    if not values:
        raise ValueError("Memory Match needs at least one pair")
    if len(set(values)) != len(values):
        raise ValueError("Card values must be distinct")
    return MemoryMatchState(board=shuffle_cards(rng, values))


def flip_card(state: MemoryMatchState, index: int) -> MemoryMatchState:
    """Turn a face-down card face-up.

    Rejected while two cards are already up, or when the card is already
    face-up or matched.
    """
    if state.is_terminal:
        return state
    if len(state.flipped_indices) >= 2:
        return state
    if not 0 <= index < len(state.board):
        return state
    card = state.board[index]
    if card.is_flipped or card.is_matched:
        return state

    board = list(state.board)
    board[index] = card.model_copy(update={"is_flipped": True})

    return state.model_copy(update={
        "board": board,
        "flipped_indices": [*state.flipped_indices, index],
    })


def check_match(state: MemoryMatchState) -> MemoryMatchState:
    """Resolve the two face-up cards.

    Equal values stay up as matched; otherwise both turn back down. Either
    way the pair counts as one move. Called by the client once the player
    has had time to see the second card.
    """
    if state.is_terminal or len(state.flipped_indices) != 2:
        return state

    first, second = state.flipped_indices
    card1, card2 = state.board[first], state.board[second]

    board = list(state.board)
    if card1.value == card2.value:
        board[first] = card1.model_copy(update={"is_matched": True})
        board[second] = card2.model_copy(update={"is_matched": True})
    else:
        board[first] = card1.model_copy(update={"is_flipped": False})
        board[second] = card2.model_copy(update={"is_flipped": False})

    all_matched = all(card.is_matched for card in board)

    return state.model_copy(update={
        "board": board,
        "flipped_indices": [],
        "moves_count": state.moves_count + 1,
        "status": GameStatus.WIN if all_matched else GameStatus.IN_PROGRESS,
        "winner": Player.P1 if all_matched else None,
    })
