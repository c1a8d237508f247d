"""Send helpers that never raise into the session."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from src.protocol.outbound import encode

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, message: dict[str, Any]) -> bool:
    return await safe_send_text(ws, encode(message))


__all__ = ["safe_send_json", "safe_send_text"]
