"""Shared error types for the Revolt voice relay."""

from __future__ import annotations


class ModelInitError(Exception):
    """Raised when a per-session generation model handle cannot be created."""


class GenerationError(Exception):
    """Raised when a generation call fails (transport, quota or malformed response)."""


class GenerationTimeoutError(GenerationError):
    """Raised when a generation call exceeds its deadline."""

    def __init__(self, timeout_s: float) -> None:
        super().__init__(f"generation timed out after {timeout_s:g}s")
        self.timeout_s = timeout_s


class InvalidMessageError(ValueError):
    """Raised when an inbound frame cannot be decoded into a client message."""


__all__ = ["GenerationError", "GenerationTimeoutError", "InvalidMessageError", "ModelInitError"]
