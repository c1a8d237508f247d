"""Inputs accepted by a session controller."""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass


class InputKind(str, Enum):
    AUDIO = "audio"
    VOICE_TEXT = "voice_text"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class SessionInput:
    kind: InputKind
    text: str

    @property
    def voice(self) -> bool:
        return self.kind is not InputKind.TEXT

    @property
    def modality(self) -> str:
        return "voice" if self.voice else "text"


__all__ = ["InputKind", "SessionInput"]
