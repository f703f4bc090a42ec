"""Game catalog, session creation and action endpoints."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ValidationError

from config import MAX_SESSIONS
from engine.catalog import (
    GameDefinition,
    apply_action,
    get_game,
    list_games,
    new_game,
    public_state,
)
from models.game_state import GameMode
from models.session import Session

logger = logging.getLogger(__name__)

router = APIRouter()


class GameInfo(BaseModel):
    """A catalog entry."""
    id: str
    name: str
    description: str
    supported_modes: list[GameMode]
    actions: list[str]


class CreateSessionRequest(BaseModel):
    """Request body for starting a game."""
    mode: GameMode | None = None
    seed: int | None = None         # Fixes shuffles and AI moves for replay


class ActionRequest(BaseModel):
    """A single player action."""
    action: str                     # e.g., "make_move", "fire_shot"
    payload: dict[str, Any] = {}


class SessionResponse(BaseModel):
    """A session and the state visible to the players."""
    session_id: str
    game_id: str
    mode: GameMode
    actions_applied: int
    state: dict[str, Any]


def _get_sessions(request: Request) -> dict[str, Session]:
    """Get the session store from app state."""
    if not hasattr(request.app.state, "sessions"):
        request.app.state.sessions = {}
    return request.app.state.sessions


def _get_definition(game_id: str) -> GameDefinition:
    try:
        return get_game(game_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown game '{game_id}'")


def _get_session(request: Request, session_id: str) -> Session:
    session = _get_sessions(request).get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _to_response(session: Session) -> SessionResponse:
    definition = get_game(session.game_id)
    return SessionResponse(
        session_id=session.id,
        game_id=session.game_id,
        mode=session.mode,
        actions_applied=session.actions_applied,
        state=public_state(definition, session.state),
    )


@router.get("/games", response_model=list[GameInfo])
def get_games(mode: GameMode | None = None) -> list[GameInfo]:
    """List the available games, optionally only those playable in ``mode``."""
    return [
        GameInfo(
            id=game.id,
            name=game.name,
            description=game.description,
            supported_modes=game.supported_modes,
            actions=list(game.actions),
        )
        for game in list_games(mode)
    ]


@router.post("/games/{game_id}/sessions", response_model=SessionResponse, status_code=201)
def create_session(
    game_id: str,
    request: Request,
    body: CreateSessionRequest | None = None,
) -> SessionResponse:
    """Start a new game and return its initial state."""
    definition = _get_definition(game_id)
    body = body or CreateSessionRequest()
    mode = body.mode or definition.supported_modes[0]
    rng = random.Random(body.seed)

    try:
        state = new_game(definition, mode, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    sessions = _get_sessions(request)
    if sessions and len(sessions) >= MAX_SESSIONS:
        oldest = min(sessions.values(), key=lambda s: s.created_at)
        del sessions[oldest.id]
        logger.info("Session store full, evicted %s (%s)", oldest.id, oldest.game_id)

    session = Session(
        id=str(uuid4()),
        game_id=game_id,
        mode=mode,
        state=state,
        rng=rng,
        created_at=datetime.now(timezone.utc),
    )
    sessions[session.id] = session
    logger.info("Started %s session %s in %s mode", game_id, session.id, mode.value)
    return _to_response(session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, request: Request) -> SessionResponse:
    """Get the current state of a session."""
    return _to_response(_get_session(request, session_id))


@router.post("/sessions/{session_id}/actions", response_model=SessionResponse)
def submit_action(
    session_id: str,
    action: ActionRequest,
    request: Request,
) -> SessionResponse:
    """Apply one player action and return the resulting state.

    Illegal moves (occupied cell, repeated letter, ...) are not errors: the
    state simply comes back unchanged, possibly with a message.
    """
    session = _get_session(request, session_id)
    definition = get_game(session.game_id)

    try:
        new_state = apply_action(
            definition,
            session.state,
            action.action,
            action.payload,
            rng=session.rng,
        )
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e.args[0]))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False))

    if new_state is session.state:
        logger.debug("Rejected %s on session %s", action.action, session_id)
    else:
        session.actions_applied += 1
        if new_state.is_terminal and not session.state.is_terminal:
            logger.info(
                "Session %s (%s) ended: %s, winner %s",
                session_id,
                session.game_id,
                new_state.status.value,
                new_state.winner.value if new_state.winner else None,
            )
    session.state = new_state
    return _to_response(session)


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str, request: Request) -> None:
    """Discard a session."""
    _get_session(request, session_id)
    del _get_sessions(request)[session_id]
    logger.info("Deleted session %s", session_id)
