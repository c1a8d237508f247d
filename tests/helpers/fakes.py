"""Test doubles for the generation endpoint and the session transport."""

from __future__ import annotations

import asyncio
from typing import Any
from pathlib import Path

from src.errors import GenerationError, ModelInitError
from src.state.settings import AppSettings, GeminiSettings, ServerSettings, GenerationSettings


class FakeModel:
    """Scripted generation model.

    Each call returns ``"reply <n>"`` (n = 0-based call index). With
    ``gated=True`` every call blocks until the test calls ``release(n)``.
    """

    def __init__(self, *, gated: bool = False, fail_on: set[int] | None = None) -> None:
        self.model_name = "fake-model"
        self.gated = gated
        self.prompts: list[str] = []
        self.max_concurrent = 0
        self._fail_on = set(fail_on or ())
        self._gates: list[asyncio.Event] = []
        self.active = 0

    async def generate(self, prompt: str) -> str:
        index = len(self.prompts)
        self.prompts.append(prompt)
        gate = asyncio.Event()
        if not self.gated:
            gate.set()
        self._gates.append(gate)

        self.active += 1
        self.max_concurrent = max(self.max_concurrent, self.active)
        try:
            await gate.wait()
        finally:
            self.active -= 1

        if index in self._fail_on:
            raise GenerationError("quota exceeded")
        return f"reply {index}"

    def release(self, index: int) -> None:
        self._gates[index].set()

    async def wait_for_calls(self, count: int, timeout_s: float = 1.0) -> None:
        async def _poll() -> None:
            while len(self.prompts) < count:
                await asyncio.sleep(0)

        await asyncio.wait_for(_poll(), timeout=timeout_s)


class FakeGenerator:
    def __init__(self, model: FakeModel | None = None, *, fail: bool = False) -> None:
        self.model = model or FakeModel()
        self.model_name = self.model.model_name
        self.fail = fail
        self.calls = 0
        self.closed = False

    def has_usable_key(self) -> bool:
        return not self.fail

    async def aclose(self) -> None:
        self.closed = True

    def new_model(self) -> FakeModel:
        self.calls += 1
        if self.fail:
            raise ModelInitError("GEMINI_API_KEY is not configured")
        return self.model


class SentMessages(list):
    """Async send callable that records every outbound message."""

    async def __call__(self, message: dict[str, Any]) -> bool:
        self.append(message)
        return True

    def of_type(self, msg_type: str) -> list[dict[str, Any]]:
        return [m for m in self if m.get("type") == msg_type]

    def types(self) -> list[str]:
        return [m.get("type") for m in self]


def make_settings(static_dir: Path | None = None, *, timeout_s: float = 30.0) -> AppSettings:
    return AppSettings(
        gemini=GeminiSettings(api_key="test-key", model_name="fake-model"),
        generation=GenerationSettings(temperature=0.7, top_p=0.95, max_output_tokens=200, timeout_s=timeout_s),
        server=ServerSettings(host="127.0.0.1", port=3000, static_dir=static_dir or Path("does-not-exist")),
    )


__all__ = ["FakeGenerator", "FakeModel", "SentMessages", "make_settings"]
