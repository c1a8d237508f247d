"""Generation model configuration (env names and defaults)."""

from __future__ import annotations

ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_GENERATION_TEMPERATURE = "GENERATION_TEMPERATURE"
ENV_GENERATION_TOP_P = "GENERATION_TOP_P"
ENV_GENERATION_MAX_OUTPUT_TOKENS = "GENERATION_MAX_OUTPUT_TOKENS"
ENV_GENERATION_TIMEOUT_S = "GENERATION_TIMEOUT_S"

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_GENERATION_TEMPERATURE = 0.7
DEFAULT_GENERATION_TOP_P = 0.95
# Short replies: the client speaks them aloud.
DEFAULT_GENERATION_MAX_OUTPUT_TOKENS = 200
# <= 0 disables the deadline.
DEFAULT_GENERATION_TIMEOUT_S = 30.0

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GENERATION_MAX_OUTPUT_TOKENS",
    "DEFAULT_GENERATION_TEMPERATURE",
    "DEFAULT_GENERATION_TIMEOUT_S",
    "DEFAULT_GENERATION_TOP_P",
    "ENV_GEMINI_MODEL",
    "ENV_GENERATION_MAX_OUTPUT_TOKENS",
    "ENV_GENERATION_TEMPERATURE",
    "ENV_GENERATION_TIMEOUT_S",
    "ENV_GENERATION_TOP_P",
]
