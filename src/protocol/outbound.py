"""Outbound (server -> client) message builders.

Every frame is a flat JSON object with a ``type`` discriminant and camelCase
fields, matching what the browser client expects.
"""

from __future__ import annotations

import time
from typing import Any

import orjson

from src.config.websocket import WS_KEY_TYPE, WS_KEY_SESSION_ID, WS_KEY_TIMESTAMP


def now_ms() -> int:
    return int(time.time() * 1000)


def session_ready(session_id: str, *, model_ready: bool) -> dict[str, Any]:
    return {
        WS_KEY_TYPE: "session_ready",
        WS_KEY_SESSION_ID: session_id,
        "modelReady": bool(model_ready),
        WS_KEY_TIMESTAMP: now_ms(),
    }


def ai_response(session_id: str, text: str, *, is_voice_response: bool) -> dict[str, Any]:
    return {
        WS_KEY_TYPE: "ai_response",
        "text": text,
        WS_KEY_SESSION_ID: session_id,
        "isVoiceResponse": bool(is_voice_response),
        WS_KEY_TIMESTAMP: now_ms(),
    }


def error(session_id: str, message: str, *, code: str | None = None) -> dict[str, Any]:
    msg: dict[str, Any] = {
        WS_KEY_TYPE: "error",
        "message": message,
        WS_KEY_SESSION_ID: session_id,
    }
    if code:
        msg["code"] = code
    return msg


def interrupted(session_id: str) -> dict[str, Any]:
    return {
        WS_KEY_TYPE: "interrupted",
        WS_KEY_SESSION_ID: session_id,
        WS_KEY_TIMESTAMP: now_ms(),
    }


def pong() -> dict[str, Any]:
    return {WS_KEY_TYPE: "pong", WS_KEY_TIMESTAMP: now_ms()}


def encode(message: dict[str, Any]) -> str:
    return orjson.dumps(message).decode("utf-8")


__all__ = [
    "ai_response",
    "encode",
    "error",
    "interrupted",
    "now_ms",
    "pong",
    "session_ready",
]
