"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_SDK_LOGS = "SHOW_SDK_LOGS"

# Characters of generated text echoed into log lines.
LOG_PREVIEW_CHARS = 100

__all__ = ["ENV_SHOW_SDK_LOGS", "LOG_FORMAT", "LOG_LEVEL", "LOG_PREVIEW_CHARS"]
