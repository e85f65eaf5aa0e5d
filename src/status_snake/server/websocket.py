"""WebSocket handler for real-time single-player games."""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from status_snake.labels import parse_score
from status_snake.server.models import InputMessage
from status_snake.server.session import GameSession, SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


async def _pump(websocket: WebSocket, session: GameSession) -> None:
    """Forward queued display notifications to the browser."""
    queue = session.display.queue
    while True:
        message = await queue.get()
        try:
            await websocket.send_text(json.dumps(message, separators=(",", ":")))
        except Exception:
            logger.warning(
                "Failed sending to session %s; dropping sender.",
                session.session_id,
            )
            return


@ws_router.websocket("/play")
async def play(websocket: WebSocket, score: str = "") -> None:
    """Player WebSocket: send inputs, receive display notifications.

    *score* is the status code currently shown by the page, if any; a
    known code resumes the session in the game-over state.
    """
    manager = _get_manager(websocket)
    try:
        session = manager.create_session()
    except ValueError as exc:
        await websocket.close(code=1013, reason=str(exc))
        return

    await websocket.accept()
    sender = asyncio.create_task(_pump(websocket, session))

    try:
        session.controller.start(parse_score(score))
        while True:
            raw = await websocket.receive_text()
            try:
                msg = InputMessage.model_validate_json(raw)
            except ValidationError:
                logger.debug("Ignoring malformed input: %r", raw)
                continue
            event = msg.to_event()
            if event is None:
                continue
            session.controller.handle(event)
    except WebSocketDisconnect:
        logger.info("Session %s disconnected.", session.session_id)
    finally:
        manager.close_session(session.session_id)
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sender
