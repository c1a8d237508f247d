"""Logging initialization."""

from __future__ import annotations

import os
import logging

from src.config.logging import LOG_LEVEL, LOG_FORMAT, ENV_SHOW_SDK_LOGS

_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging() -> None:
    # The Gemini SDK logs every HTTP request at INFO. Keep it tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_SDK_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
