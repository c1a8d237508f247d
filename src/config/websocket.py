"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/"

# Message keys (camelCase on the wire)
WS_KEY_TYPE = "type"
WS_KEY_TEXT = "text"
WS_KEY_AUDIO = "audio"
WS_KEY_SESSION_ID = "sessionId"
WS_KEY_TIMESTAMP = "timestamp"

# Error codes (error.code values)
WS_ERROR_INVALID_MESSAGE = "invalid_message"
WS_ERROR_GENERATION_FAILED = "generation_failed"
WS_ERROR_GENERATION_TIMEOUT = "generation_timeout"

WS_INVALID_MESSAGE_TEXT = "Invalid message format"

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_TEXT",
    "WS_KEY_AUDIO",
    "WS_KEY_SESSION_ID",
    "WS_KEY_TIMESTAMP",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_GENERATION_FAILED",
    "WS_ERROR_GENERATION_TIMEOUT",
    "WS_INVALID_MESSAGE_TEXT",
]
