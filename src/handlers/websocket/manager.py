"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib
from functools import partial

from fastapi import WebSocket

from src.protocol import outbound
from src.state import RuntimeDeps
from src.sessions import SessionController

from .errors import safe_send_json
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    registry = runtime_deps.sessions
    await ws.accept()

    session = SessionController(
        session_id=registry.new_session_id(),
        send=partial(safe_send_json, ws),
        generator=runtime_deps.generator,
    )
    session_id = registry.register(session)
    logger.info("New session connected: %s. Active: %s", session_id, registry.count())

    try:
        model_ready = await session.initialize_model()
        await session.send(outbound.session_ready(session_id, model_ready=model_ready))
        await run_message_loop(ws, session)
    except Exception:
        logger.exception("Session %s: WebSocket error", session_id)
        with contextlib.suppress(Exception):
            await ws.close()
    finally:
        session.cleanup()
        registry.remove(session_id)
        await session.drain()
        logger.info("Session disconnected: %s. Active: %s", session_id, registry.count())


__all__ = ["handle_websocket_connection"]
