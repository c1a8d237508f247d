"""Runtime dependency construction (session registry + generation client)."""

from __future__ import annotations

import logging

from src.state import RuntimeDeps
from src.sessions import SessionRegistry
from src.state.settings import AppSettings
from src.generation import GeminiGenerator

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    generator = GeminiGenerator(gemini=settings.gemini, generation=settings.generation)
    logger.info(
        "generation: model=%s timeout_s=%s key_configured=%s",
        generator.model_name,
        settings.generation.timeout_s,
        generator.has_usable_key(),
    )

    return RuntimeDeps(
        sessions=SessionRegistry(),
        generator=generator,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
