"""Client message decoding: raw frame -> closed inbound variant."""

from __future__ import annotations

from typing import Any
from collections.abc import Callable

import orjson

from src.errors import InvalidMessageError
from src.config.websocket import WS_KEY_TEXT, WS_KEY_TYPE, WS_KEY_AUDIO
from src.protocol.inbound import (
    Ping,
    AudioData,
    Interrupt,
    TextInput,
    InboundType,
    KnownMessage,
    InboundMessage,
    UnknownMessage,
    VoiceTextInput,
)

DecoderFn = Callable[[dict[str, Any]], KnownMessage]


def _require_text(msg: dict[str, Any], msg_type: str) -> str:
    text = msg.get(WS_KEY_TEXT)
    if not isinstance(text, str):
        raise InvalidMessageError(f"'{msg_type}' requires a '{WS_KEY_TEXT}' string")
    return text


def _decode_audio(msg: dict[str, Any]) -> AudioData:
    audio = msg.get(WS_KEY_AUDIO)
    if not isinstance(audio, dict):
        raise InvalidMessageError(f"'{InboundType.AUDIO_DATA.value}' requires an '{WS_KEY_AUDIO}' object")
    return AudioData(audio=audio)


def _decode_voice_text(msg: dict[str, Any]) -> VoiceTextInput:
    return VoiceTextInput(text=_require_text(msg, InboundType.VOICE_TEXT_INPUT.value))


def _decode_text(msg: dict[str, Any]) -> TextInput:
    return TextInput(text=_require_text(msg, InboundType.TEXT_INPUT.value))


DECODERS: dict[InboundType, DecoderFn] = {
    InboundType.AUDIO_DATA: _decode_audio,
    InboundType.VOICE_TEXT_INPUT: _decode_voice_text,
    InboundType.TEXT_INPUT: _decode_text,
    InboundType.INTERRUPT: lambda _msg: Interrupt(),
    InboundType.PING: lambda _msg: Ping(),
}


def parse_client_message(raw: str | bytes) -> InboundMessage:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise InvalidMessageError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise InvalidMessageError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise InvalidMessageError(f"message missing non-empty '{WS_KEY_TYPE}'")
    msg_type = msg_type.strip()

    try:
        kind = InboundType(msg_type)
    except ValueError:
        return UnknownMessage(raw_type=msg_type)
    return DECODERS[kind](msg)


__all__ = ["DECODERS", "parse_client_message"]
