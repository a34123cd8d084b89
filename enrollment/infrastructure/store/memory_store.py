from __future__ import annotations

import time
import uuid

from enrollment.application.ports.session_store import SessionStorePort
from enrollment.domain.entities.wizard_session import WizardSession


class MemorySessionStore(SessionStorePort):
    """Process-local sessions. Oldest sessions are evicted once the limit is reached."""

    def __init__(self, limit: int = 10_000) -> None:
        self._sessions: dict[str, WizardSession] = {}
        self._limit = limit

    def create(self) -> WizardSession:
        if len(self._sessions) >= self._limit:
            oldest = next(iter(self._sessions))
            del self._sessions[oldest]
        session = WizardSession(session_id=uuid.uuid4().hex, created_at=time.time())
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> WizardSession | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
