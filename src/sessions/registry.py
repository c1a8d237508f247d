"""Registry of live WebSocket sessions."""

from __future__ import annotations

import uuid
import logging
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .controller import SessionController


class SessionRegistry:
    """Maps session id -> controller for every open connection.

    Owned by the application lifespan and touched only from the event loop,
    so the map needs no lock.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SessionController] = {}

    def new_session_id(self) -> str:
        while True:
            session_id = str(uuid.uuid4())
            if session_id not in self._sessions:
                return session_id

    def register(self, session: SessionController) -> str:
        self._sessions[session.session_id] = session
        return session.session_id

    def remove(self, session_id: str) -> SessionController | None:
        return self._sessions.pop(session_id, None)

    def get(self, session_id: str) -> SessionController | None:
        return self._sessions.get(session_id)

    def count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            try:
                session.cleanup()
            except Exception:
                logger.exception("session cleanup failed session_id=%s", session.session_id)
        if sessions:
            logger.info("Cleared %s active sessions", len(sessions))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SessionRegistry"]
