"""Factory for per-session Gemini model handles."""

from __future__ import annotations

import logging
from typing import Any

from google import genai

from src.errors import ModelInitError
from src.config.secrets import DEMO_GEMINI_API_KEY
from src.state.settings import GeminiSettings, GenerationSettings

from .model import GenerationModel

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """Owns the SDK client and hands out one model handle per session.

    The SDK client is created on first use so a missing credential degrades
    sessions instead of failing server startup.
    """

    def __init__(
        self,
        *,
        gemini: GeminiSettings,
        generation: GenerationSettings,
        client: Any | None = None,
    ) -> None:
        self._api_key = gemini.api_key
        self._model_name = gemini.model_name
        self._generation = generation
        self._client = client

    @property
    def model_name(self) -> str:
        return self._model_name

    def has_usable_key(self) -> bool:
        return bool(self._api_key) and self._api_key != DEMO_GEMINI_API_KEY

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self._api_key:
            raise ModelInitError("GEMINI_API_KEY is not configured")
        try:
            self._client = genai.Client(api_key=self._api_key)
        except Exception as exc:
            raise ModelInitError(f"failed to create Gemini client: {exc}") from exc
        return self._client

    def new_model(self) -> GenerationModel:
        return GenerationModel(
            client=self._get_client(),
            model_name=self._model_name,
            settings=self._generation,
        )

    async def aclose(self) -> None:
        """Close the SDK client's async transport; a no-op if it was never created."""
        client, self._client = self._client, None
        if client is None:
            return
        await client.aio.aclose()
        logger.info("Gemini client closed")


__all__ = ["GeminiGenerator"]
