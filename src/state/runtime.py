"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.sessions.registry import SessionRegistry
    from src.generation.client import GeminiGenerator


@dataclass(slots=True)
class RuntimeDeps:
    sessions: SessionRegistry
    generator: GeminiGenerator
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            self.sessions.clear()
        except Exception:
            logger.exception("runtime shutdown: clearing sessions failed")
        try:
            await self.generator.aclose()
        except Exception:
            logger.exception("runtime shutdown: closing generation client failed")


__all__ = ["RuntimeDeps"]
