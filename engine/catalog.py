"""Catalog of Playground games and the generic action dispatcher.

The HTTP layer only knows game ids and action names; everything it needs
to start a game, validate an action payload and call the right transition
lives in a GameDefinition here.
"""

from __future__ import annotations

import random
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, create_model

from engine import (
    battleship,
    connect_four,
    geo_quiz,
    memory_match,
    number_duel,
    rock_paper_scissors,
    tictactoe,
    word_guess,
    wordle,
)
from models.battleship import Orientation
from models.game_state import GameMode, GameState
from models.rock_paper_scissors import Move


class ActionSpec(BaseModel):
    """A named transition and the payload it accepts."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    handler: Callable[..., Any]
    payload: type[BaseModel]
    uses_rng: bool = False          # Handler takes the session's rng (AI moves)


class GameDefinition(BaseModel):
    """Everything needed to host one game."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    name: str
    description: str
    supported_modes: list[GameMode]
    new_game: Callable[[GameMode, random.Random], GameState]
    actions: dict[str, ActionSpec]
    hidden_fields: set[str] = set()  # Not shown until the game is over
    mask: Callable[[dict], dict] | None = None


def _action(
    name: str,
    handler: Callable[..., Any],
    uses_rng: bool = False,
    **fields: Any,
) -> tuple[str, ActionSpec]:
    payload = create_model(
        f"{name.title().replace('_', '')}Payload",
        __config__=ConfigDict(extra="forbid"),
        **fields,
    )
    return name, ActionSpec(handler=handler, payload=payload, uses_rng=uses_rng)


def _mask_face_down_cards(data: dict) -> dict:
    """Hide the value of every card the player cannot currently see."""
    data["board"] = [
        card if card["is_flipped"] or card["is_matched"] else {**card, "value": None}
        for card in data["board"]
    ]
    return data


def _mask_quiz_answer(data: dict) -> dict:
    """Drop the name of the city being asked about; the options stay."""
    data["current_location"] = {
        key: value for key, value in data["current_location"].items() if key != "name"
    }
    return data


GAMES: dict[str, GameDefinition] = {
    game.id: game
    for game in (
        GameDefinition(
            id="tictactoe",
            name="Tic-Tac-Toe",
            description="Classic 3x3 strategy game",
            supported_modes=[GameMode.MULTIPLAYER],
            new_game=lambda mode, rng: tictactoe.start_new_game(),
            actions=dict([_action("make_move", tictactoe.make_move, index=(int, ...))]),
        ),
        GameDefinition(
            id="connect-four",
            name="4-in-a-row",
            description="Connect 4 pieces to win",
            supported_modes=[GameMode.MULTIPLAYER],
            new_game=lambda mode, rng: connect_four.start_new_game(),
            actions=dict([_action("make_move", connect_four.make_move, column=(int, ...))]),
        ),
        GameDefinition(
            id="rock-paper-scissors",
            name="Rock-Paper-Scissors",
            description="Classic hand game",
            supported_modes=[GameMode.SINGLEPLAYER, GameMode.MULTIPLAYER],
            new_game=lambda mode, rng: rock_paper_scissors.start_new_game(mode),
            actions=dict([
                _action("make_move", rock_paper_scissors.make_move, uses_rng=True, move=(Move, ...)),
            ]),
            hidden_fields={"player1_move"},
        ),
        GameDefinition(
            id="word-guess",
            name="Word Guess (TR)",
            description="Guess the Turkish word",
            supported_modes=[GameMode.SINGLEPLAYER],
            new_game=lambda mode, rng: word_guess.start_new_game(rng),
            actions=dict([_action("make_guess", word_guess.make_guess, letter=(str, ...))]),
            hidden_fields={"target_word"},
        ),
        GameDefinition(
            id="memory-match",
            name="Memory Match",
            description="Find matching pairs",
            supported_modes=[GameMode.SINGLEPLAYER],
            new_game=lambda mode, rng: memory_match.start_new_game(rng),
            actions=dict([
                _action("flip_card", memory_match.flip_card, index=(int, ...)),
                _action("check_match", memory_match.check_match),
            ]),
            mask=_mask_face_down_cards,
        ),
        GameDefinition(
            id="number-duel",
            name="Number Duel",
            description="Guess the secret number",
            supported_modes=[GameMode.SINGLEPLAYER, GameMode.MULTIPLAYER],
            new_game=lambda mode, rng: number_duel.start_new_game(mode, rng),
            actions=dict([_action("make_guess", number_duel.make_guess, guess=(int, ...))]),
            hidden_fields={"target_number"},
        ),
        GameDefinition(
            id="battleship",
            name="Battleship",
            description="Sink opponent ships",
            supported_modes=[GameMode.MULTIPLAYER],
            new_game=lambda mode, rng: battleship.start_new_game(),
            actions=dict([
                _action("select_ship", battleship.select_ship, ship_id=(str, ...)),
                _action("toggle_orientation", battleship.toggle_orientation),
                _action(
                    "place_ship",
                    battleship.place_ship,
                    row=(int, ...),
                    col=(int, ...),
                    ship_id=(str | None, None),
                    orientation=(Orientation | None, None),
                ),
                _action("finish_setup", battleship.finish_setup),
                _action("fire_shot", battleship.fire_shot, row=(int, ...), col=(int, ...)),
            ]),
        ),
        GameDefinition(
            id="geo-quiz",
            name="Tiny GeoGuess",
            description="Guess the city from the image!",
            supported_modes=[GameMode.SINGLEPLAYER],
            new_game=lambda mode, rng: geo_quiz.start_new_game(rng),
            actions=dict([_action("make_guess", geo_quiz.make_guess, choice=(str, ...))]),
            hidden_fields={"deck"},
            mask=_mask_quiz_answer,
        ),
        GameDefinition(
            id="wordle",
            name="Türkçe Wordle",
            description="5 harfli Türkçe kelimeyi tahmin et!",
            supported_modes=[GameMode.SINGLEPLAYER],
            new_game=lambda mode, rng: wordle.init_game(rng=rng),
            actions=dict([
                _action("update_current_guess", wordle.update_current_guess, text=(str, ...)),
                _action("submit_guess", wordle.submit_guess, guess=(str | None, None)),
            ]),
            hidden_fields={"target_word"},
        ),
    )
}


def get_game(game_id: str) -> GameDefinition:
    """Look up a game by id.

    Raises:
        KeyError: If no such game exists.
    """
    if game_id not in GAMES:
        raise KeyError(f"Unknown game '{game_id}'")
    return GAMES[game_id]


def list_games(mode: GameMode | None = None) -> list[GameDefinition]:
    """All games, or only those playable in ``mode``."""
    return [
        game for game in GAMES.values()
        if mode is None or mode in game.supported_modes
    ]


def new_game(
    definition: GameDefinition,
    mode: GameMode | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Start a game in ``mode`` (defaults to the game's first supported mode).

    Raises:
        ValueError: If the game cannot be played in ``mode``.
    """
    mode = mode or definition.supported_modes[0]
    if mode not in definition.supported_modes:
        raise ValueError(f"{definition.name} does not support {mode.value} mode")
    return definition.new_game(mode, rng or random.Random())


def apply_action(
    definition: GameDefinition,
    state: GameState,
    action: str,
    payload: dict[str, Any] | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Validate ``payload`` and run the named transition on ``state``.

    Raises:
        KeyError: If the game has no such action.
        pydantic.ValidationError: If the payload does not fit the action.
    """
    if action not in definition.actions:
        raise KeyError(f"{definition.name} has no action '{action}'")
    spec = definition.actions[action]
    arguments = dict(spec.payload.model_validate(payload or {}))
    if spec.uses_rng:
        arguments["rng"] = rng
    return spec.handler(state, **arguments)


def public_state(definition: GameDefinition, state: GameState) -> dict:
    """Serialize ``state`` for a client, hiding secrets while the game is on."""
    if state.is_terminal:
        return state.model_dump(mode="json")
    data = state.model_dump(mode="json", exclude=definition.hidden_fields or None)
    if definition.mask is not None:
        data = definition.mask(data)
    return data
