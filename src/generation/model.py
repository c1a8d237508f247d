"""Per-session handle onto a configured Gemini model."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.genai import types

from src.state.settings import GenerationSettings
from src.errors import GenerationError, GenerationTimeoutError

logger = logging.getLogger(__name__)


class GenerationModel:
    def __init__(self, *, client: Any, model_name: str, settings: GenerationSettings) -> None:
        self._client = client
        self.model_name = model_name
        self._timeout_s = float(settings.timeout_s)
        self._config = types.GenerateContentConfig(
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_output_tokens=settings.max_output_tokens,
        )

    async def _call(self, prompt: str) -> Any:
        return await self._client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=self._config,
        )

    async def generate(self, prompt: str) -> str:
        """Run one generation call and return the response text.

        Raises GenerationTimeoutError when the deadline expires and
        GenerationError for any other SDK, transport or response failure.
        """
        try:
            if self._timeout_s > 0:
                response = await asyncio.wait_for(self._call(prompt), timeout=self._timeout_s)
            else:
                response = await self._call(prompt)
        except TimeoutError as exc:
            raise GenerationTimeoutError(self._timeout_s) from exc
        except Exception as exc:
            raise GenerationError(f"generation call failed: {exc}") from exc

        try:
            text = response.text
        except Exception as exc:
            raise GenerationError(f"malformed generation response: {exc}") from exc
        if not isinstance(text, str) or not text.strip():
            raise GenerationError("generation response contained no text")
        return text


__all__ = ["GenerationModel"]
