from . import outbound
from .inbound import (
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
    "outbound",
]
