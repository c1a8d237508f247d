"""Inbound (client -> server) message variants."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias
from dataclasses import field, dataclass


class InboundType(str, Enum):
    AUDIO_DATA = "audio_data"
    VOICE_TEXT_INPUT = "voice_text_input"
    TEXT_INPUT = "text_input"
    INTERRUPT = "interrupt"
    PING = "ping"


@dataclass(frozen=True, slots=True)
class AudioData:
    # Opaque client payload; only an optional client-side "text" transcript is used.
    audio: dict[str, Any] = field(default_factory=dict)
    type: InboundType = InboundType.AUDIO_DATA

    @property
    def transcript(self) -> str | None:
        text = self.audio.get("text")
        if isinstance(text, str) and text.strip():
            return text
        return None


@dataclass(frozen=True, slots=True)
class VoiceTextInput:
    text: str
    type: InboundType = InboundType.VOICE_TEXT_INPUT


@dataclass(frozen=True, slots=True)
class TextInput:
    text: str
    type: InboundType = InboundType.TEXT_INPUT


@dataclass(frozen=True, slots=True)
class Interrupt:
    type: InboundType = InboundType.INTERRUPT


@dataclass(frozen=True, slots=True)
class Ping:
    type: InboundType = InboundType.PING


@dataclass(frozen=True, slots=True)
class UnknownMessage:
    """A well-formed frame whose type this server does not handle."""

    raw_type: str


KnownMessage: TypeAlias = AudioData | VoiceTextInput | TextInput | Interrupt | Ping
InboundMessage: TypeAlias = KnownMessage | UnknownMessage

__all__ = [
    "AudioData",
    "InboundMessage",
    "InboundType",
    "Interrupt",
    "KnownMessage",
    "Ping",
    "TextInput",
    "UnknownMessage",
    "VoiceTextInput",
]
