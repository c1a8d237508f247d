"""Configuration module exports (env names, defaults and protocol constants)."""

from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "WS_ENDPOINT_PATH",
]
