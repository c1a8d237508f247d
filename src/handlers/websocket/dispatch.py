"""Dispatch handlers for decoded client messages."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from src.protocol import outbound
from src.config.prompts import UNTRANSCRIBED_AUDIO_TEXT
from src.sessions import InputKind, SessionInput, SessionController
from src.protocol.inbound import (
    Ping,
    AudioData,
    Interrupt,
    TextInput,
    InboundType,
    InboundMessage,
    UnknownMessage,
    VoiceTextInput,
)

logger = logging.getLogger(__name__)

HandlerFn = Callable[[SessionController, Any], Awaitable[None]]


async def _handle_audio(session: SessionController, msg: AudioData) -> None:
    text = msg.transcript
    if text is None:
        logger.info("Session %s: no transcription available, using generic voice prompt", session.session_id)
        text = UNTRANSCRIBED_AUDIO_TEXT
    session.submit(SessionInput(kind=InputKind.AUDIO, text=text))


async def _handle_voice_text(session: SessionController, msg: VoiceTextInput) -> None:
    logger.info("Session %s: processing voice-to-text: %s", session.session_id, msg.text)
    session.submit(SessionInput(kind=InputKind.VOICE_TEXT, text=msg.text))


async def _handle_text(session: SessionController, msg: TextInput) -> None:
    session.submit(SessionInput(kind=InputKind.TEXT, text=msg.text))


async def _handle_interrupt(session: SessionController, _msg: Interrupt) -> None:
    await session.interrupt()


async def _handle_ping(session: SessionController, _msg: Ping) -> None:
    await session.send(outbound.pong())


HANDLERS: dict[InboundType, HandlerFn] = {
    InboundType.AUDIO_DATA: _handle_audio,
    InboundType.VOICE_TEXT_INPUT: _handle_voice_text,
    InboundType.TEXT_INPUT: _handle_text,
    InboundType.INTERRUPT: _handle_interrupt,
    InboundType.PING: _handle_ping,
}


async def dispatch_message(session: SessionController, msg: InboundMessage) -> None:
    if isinstance(msg, UnknownMessage):
        logger.info("Session %s: unknown message type: %s", session.session_id, msg.raw_type)
        return
    await HANDLERS[msg.type](session, msg)


__all__ = ["HANDLERS", "dispatch_message"]
