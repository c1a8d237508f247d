"""Prompt construction for single-turn generation calls."""

from __future__ import annotations

from src.config.prompts import (
    ASSISTANT_LABEL,
    TEXT_INPUT_LABEL,
    VOICE_INPUT_LABEL,
    REVOLT_SYSTEM_INSTRUCTION,
)


def build_prompt(text: str, *, voice: bool, system_instruction: str = REVOLT_SYSTEM_INSTRUCTION) -> str:
    """Concatenate the system directive, an input-source label and the user's text.

    Each call is independent: no conversation history is carried between turns.
    """
    label = VOICE_INPUT_LABEL if voice else TEXT_INPUT_LABEL
    return f"{system_instruction}\n\n{label}: {text}\n\n{ASSISTANT_LABEL}:"


__all__ = ["build_prompt"]
