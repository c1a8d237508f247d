"""Per-connection conversation state (dataclass only)."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING
from dataclasses import field, dataclass

if TYPE_CHECKING:
    from src.sessions.inputs import SessionInput


@dataclass(slots=True)
class SessionState:
    session_id: str
    processing: bool = False
    # Audio inputs accepted while a generation call was outstanding (FIFO, unbounded).
    pending: deque[SessionInput] = field(default_factory=deque)
    # Bumped on interrupt/cleanup; a run whose epoch no longer matches is stale.
    epoch: int = 0
    model_ready: bool = False
    closed: bool = False


__all__ = ["SessionState"]
