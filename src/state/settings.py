"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeminiSettings:
    api_key: str
    model_name: str


@dataclass(frozen=True, slots=True)
class GenerationSettings:
    temperature: float
    top_p: float
    max_output_tokens: int
    timeout_s: float


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    static_dir: Path


@dataclass(frozen=True, slots=True)
class AppSettings:
    gemini: GeminiSettings
    generation: GenerationSettings
    server: ServerSettings


__all__ = [
    "AppSettings",
    "GeminiSettings",
    "GenerationSettings",
    "ServerSettings",
]
