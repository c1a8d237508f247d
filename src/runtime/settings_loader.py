"""Environment parsing for runtime settings."""

from __future__ import annotations

import os
import logging
from pathlib import Path

from src.config.secrets import ENV_GEMINI_API_KEY, DEMO_GEMINI_API_KEY
from src.state.settings import AppSettings, GeminiSettings, ServerSettings, GenerationSettings
from src.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_STATIC_DIR,
    DEFAULT_STATIC_DIR,
)
from src.config.models import (
    ENV_GEMINI_MODEL,
    DEFAULT_GEMINI_MODEL,
    ENV_GENERATION_TOP_P,
    DEFAULT_GENERATION_TOP_P,
    ENV_GENERATION_TIMEOUT_S,
    ENV_GENERATION_TEMPERATURE,
    DEFAULT_GENERATION_TIMEOUT_S,
    DEFAULT_GENERATION_TEMPERATURE,
    ENV_GENERATION_MAX_OUTPUT_TOKENS,
    DEFAULT_GENERATION_MAX_OUTPUT_TOKENS,
)

logger = logging.getLogger(__name__)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_gemini_settings() -> GeminiSettings:
    api_key = (os.getenv(ENV_GEMINI_API_KEY) or "").strip()
    if not api_key or api_key == DEMO_GEMINI_API_KEY:
        logger.warning("Using demo or missing API key. Set a valid %s in the environment or .env", ENV_GEMINI_API_KEY)
        logger.warning("Get an API key from: https://aistudio.google.com/")
    return GeminiSettings(
        api_key=api_key,
        model_name=_str_env(ENV_GEMINI_MODEL, DEFAULT_GEMINI_MODEL),
    )


def _load_generation_settings() -> GenerationSettings:
    temperature = _float_env(ENV_GENERATION_TEMPERATURE, DEFAULT_GENERATION_TEMPERATURE)
    top_p = _float_env(ENV_GENERATION_TOP_P, DEFAULT_GENERATION_TOP_P)
    if top_p <= 0.0 or top_p > 1.0:
        top_p = DEFAULT_GENERATION_TOP_P
    max_output_tokens = _int_env(ENV_GENERATION_MAX_OUTPUT_TOKENS, DEFAULT_GENERATION_MAX_OUTPUT_TOKENS)
    return GenerationSettings(
        temperature=max(0.0, temperature),
        top_p=top_p,
        max_output_tokens=max(1, max_output_tokens),
        timeout_s=max(0.0, _float_env(ENV_GENERATION_TIMEOUT_S, DEFAULT_GENERATION_TIMEOUT_S)),
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        static_dir=Path(_str_env(ENV_STATIC_DIR, DEFAULT_STATIC_DIR)).expanduser(),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        gemini=_load_gemini_settings(),
        generation=_load_generation_settings(),
        server=_load_server_settings(),
    )


__all__ = ["load_settings"]
