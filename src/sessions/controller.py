"""Per-connection session controller: single-flight generation with interruption."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Literal
from collections.abc import Callable, Awaitable

from src.protocol import outbound
from src.state import SessionState
from src.generation import build_prompt
from src.config.logging import LOG_PREVIEW_CHARS
from src.generation.client import GeminiGenerator
from src.generation.model import GenerationModel
from src.errors import GenerationError, GenerationTimeoutError
from src.config.websocket import WS_ERROR_GENERATION_FAILED, WS_ERROR_GENERATION_TIMEOUT

from .inputs import InputKind, SessionInput

logger = logging.getLogger(__name__)

SendFn = Callable[[dict[str, Any]], Awaitable[bool]]
SubmitOutcome = Literal["started", "queued", "dropped"]


class SessionController:
    """Mediates between one client connection and the generation endpoint.

    At most one generation call is logically outstanding. Audio inputs that
    arrive while busy are queued and drained in FIFO order by the same work
    loop; text inputs that arrive while busy are dropped. ``interrupt`` resets
    the state immediately and marks the in-flight call stale so its result is
    never delivered.
    """

    def __init__(self, *, session_id: str, send: SendFn, generator: GeminiGenerator) -> None:
        self.state = SessionState(session_id=session_id)
        self._send_fn = send
        self._generator = generator
        self._model: GenerationModel | None = None
        self._model_init_result: bool | None = None
        self._send_lock = asyncio.Lock()
        self._tasks: set[asyncio.Task] = set()

    @property
    def session_id(self) -> str:
        return self.state.session_id

    @property
    def processing(self) -> bool:
        return self.state.processing

    @property
    def pending_count(self) -> int:
        return len(self.state.pending)

    @property
    def model_ready(self) -> bool:
        return self.state.model_ready

    @property
    def closed(self) -> bool:
        return self.state.closed

    async def initialize_model(self) -> bool:
        """Create this session's model handle; reports failure instead of raising."""
        if self._model_init_result is not None:
            return self._model_init_result
        try:
            self._model = self._generator.new_model()
        except Exception as exc:
            logger.error("Session %s: model initialization failed: %s", self.session_id, exc)
            self._model_init_result = False
        else:
            logger.info("Session %s: model initialized (%s)", self.session_id, self._model.model_name)
            self._model_init_result = True
        self.state.model_ready = self._model_init_result
        return self._model_init_result

    async def send(self, message: dict[str, Any]) -> bool:
        if self.state.closed:
            return False
        async with self._send_lock:
            return await self._send_fn(message)

    def submit(self, item: SessionInput) -> SubmitOutcome:
        state = self.state
        if state.closed:
            logger.debug("Session %s: ignoring %s input after close", self.session_id, item.kind.value)
            return "dropped"

        if state.processing:
            if item.kind is InputKind.AUDIO:
                state.pending.append(item)
                logger.info(
                    "Session %s: already processing, queuing audio (pending=%s)",
                    self.session_id,
                    len(state.pending),
                )
                return "queued"
            logger.info("Session %s: already processing, dropping %s input", self.session_id, item.modality)
            return "dropped"

        state.processing = True
        task = asyncio.create_task(self._run(item, state.epoch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return "started"

    async def interrupt(self) -> None:
        logger.info("Session %s: interruption triggered", self.session_id)
        state = self.state
        state.processing = False
        state.pending.clear()
        state.epoch += 1
        await self.send(outbound.interrupted(self.session_id))

    def cleanup(self) -> None:
        state = self.state
        if state.closed:
            return
        state.closed = True
        state.epoch += 1
        state.processing = False
        state.pending.clear()
        self._model = None
        for task in list(self._tasks):
            task.cancel()
        logger.info("Session %s: cleaned up", self.session_id)

    async def drain(self) -> None:
        """Await every outstanding work loop, stale or cancelled ones included.

        Called after ``cleanup`` on connection teardown so no loop outlives its socket.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _is_stale(self, epoch: int) -> bool:
        return self.state.closed or epoch != self.state.epoch

    async def _run(self, item: SessionInput, epoch: int) -> None:
        current: SessionInput | None = item
        while current is not None:
            await self._process(current, epoch)
            if self._is_stale(epoch):
                return
            current = self.state.pending.popleft() if self.state.pending else None
        self.state.processing = False

    async def _generate(self, prompt: str) -> str:
        if self._model is None:
            raise GenerationError("model is not initialized")
        return await self._model.generate(prompt)

    async def _process(self, item: SessionInput, epoch: int) -> None:
        if item.kind is InputKind.AUDIO:
            logger.info("Session %s: voice transcription received: %s", self.session_id, item.text)
        else:
            logger.info("Session %s: processing %s input: %s", self.session_id, item.modality, item.text)

        prompt = build_prompt(item.text, voice=item.voice)
        try:
            reply = await self._generate(prompt)
        except Exception as exc:
            if self._is_stale(epoch):
                logger.info(
                    "Session %s: discarding failure of interrupted %s call: %s", self.session_id, item.modality, exc
                )
                return
            logger.error("Session %s: error processing %s input: %s", self.session_id, item.modality, exc)
            code = WS_ERROR_GENERATION_TIMEOUT if isinstance(exc, GenerationTimeoutError) else WS_ERROR_GENERATION_FAILED
            await self.send(outbound.error(self.session_id, f"Failed to process {item.modality} input", code=code))
            return

        if self._is_stale(epoch):
            logger.info("Session %s: discarding stale %s response after interrupt", self.session_id, item.modality)
            return

        await self.send(outbound.ai_response(self.session_id, reply, is_voice_response=item.voice))
        logger.info(
            "Session %s: %s response: %s...",
            self.session_id,
            item.modality.capitalize(),
            reply[:LOG_PREVIEW_CHARS],
        )


__all__ = ["SessionController", "SendFn", "SubmitOutcome"]
