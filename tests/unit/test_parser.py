from __future__ import annotations

import json

import pytest

from src.errors import InvalidMessageError
from src.handlers.websocket.parser import parse_client_message
from src.protocol import (
    Ping,
    AudioData,
    Interrupt,
    TextInput,
    InboundType,
    UnknownMessage,
    VoiceTextInput,
)


def test_parse_text_input() -> None:
    msg = parse_client_message(json.dumps({"type": "text_input", "text": "What is the RV400 range?"}))
    assert msg == TextInput(text="What is the RV400 range?")
    assert msg.type is InboundType.TEXT_INPUT


@pytest.mark.parametrize("text", ["", "   ", "  padded  "])
def test_parse_text_is_passed_through_unchanged(text: str) -> None:
    assert parse_client_message(json.dumps({"type": "text_input", "text": text})) == TextInput(text=text)
    assert parse_client_message(json.dumps({"type": "voice_text_input", "text": text})) == VoiceTextInput(text=text)


def test_parse_voice_text_input() -> None:
    msg = parse_client_message(json.dumps({"type": "voice_text_input", "text": "hello"}))
    assert isinstance(msg, VoiceTextInput)
    assert msg.text == "hello"


def test_parse_audio_data_with_transcript() -> None:
    msg = parse_client_message(json.dumps({"type": "audio_data", "audio": {"text": "battery swap", "format": "webm"}}))
    assert isinstance(msg, AudioData)
    assert msg.transcript == "battery swap"


@pytest.mark.parametrize("audio", [{}, {"text": ""}, {"text": "   "}, {"text": 5}])
def test_parse_audio_data_without_transcript(audio: dict) -> None:
    msg = parse_client_message(json.dumps({"type": "audio_data", "audio": audio}))
    assert isinstance(msg, AudioData)
    assert msg.transcript is None


def test_parse_control_messages() -> None:
    assert parse_client_message('{"type": "ping"}') == Ping()
    assert parse_client_message('{"type": "interrupt"}') == Interrupt()


def test_parse_accepts_binary_frames() -> None:
    msg = parse_client_message(json.dumps({"type": "ping"}).encode("utf-8"))
    assert isinstance(msg, Ping)


def test_parse_unknown_type() -> None:
    msg = parse_client_message(json.dumps({"type": "start_recording"}))
    assert msg == UnknownMessage(raw_type="start_recording")


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        b"\xff\xfe",
        json.dumps([]),
        json.dumps("ping"),
        json.dumps({}),
        json.dumps({"type": ""}),
        json.dumps({"type": 3}),
        json.dumps({"type": "text_input"}),
        json.dumps({"type": "text_input", "text": None}),
        json.dumps({"type": "voice_text_input", "text": ["a"]}),
        json.dumps({"type": "audio_data"}),
        json.dumps({"type": "audio_data", "audio": "base64data"}),
    ],
)
def test_parse_invalid(raw: str | bytes) -> None:
    with pytest.raises(InvalidMessageError):
        parse_client_message(raw)
