"""WebSocket receive loop for one session."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from src.protocol import outbound
from src.errors import InvalidMessageError
from src.sessions import SessionController
from src.config.websocket import WS_INVALID_MESSAGE_TEXT, WS_ERROR_INVALID_MESSAGE

from .dispatch import dispatch_message
from .parser import parse_client_message

logger = logging.getLogger(__name__)


async def _receive_frame(ws: WebSocket) -> str | bytes:
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text
    return message.get("bytes") or b""


async def _send_invalid_message(session: SessionController) -> None:
    await session.send(
        outbound.error(session.session_id, WS_INVALID_MESSAGE_TEXT, code=WS_ERROR_INVALID_MESSAGE),
    )


async def run_message_loop(ws: WebSocket, session: SessionController) -> None:
    """Handle frames until the client disconnects.

    A bad frame yields one ``error`` message and the loop keeps going.
    """
    try:
        while True:
            raw = await _receive_frame(ws)
            try:
                msg = parse_client_message(raw)
            except InvalidMessageError as exc:
                logger.warning("Session %s: invalid message: %s", session.session_id, exc)
                await _send_invalid_message(session)
                continue

            try:
                await dispatch_message(session, msg)
            except Exception:
                logger.exception("Session %s: error processing message", session.session_id)
                await _send_invalid_message(session)
    except WebSocketDisconnect:
        return


__all__ = ["run_message_loop"]
