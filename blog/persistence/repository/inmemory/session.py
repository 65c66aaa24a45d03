"""In-memory admin session repository for testing."""

from typing import Optional

from blog.domain.model.session import AdminSession
from blog.domain.repository.session import SessionRepository
from blog.domain.value import SessionId


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, AdminSession] = {}

    async def find_by_id(self, session_id: SessionId) -> Optional[AdminSession]:
        """Find a session that has not expired."""
        session = self._sessions.get(session_id)
        if session is None or session.is_expired():
            return None
        return session

    async def save(self, session: AdminSession) -> AdminSession:
        """Insert or replace a session."""
        self._sessions[session.id] = session
        return session

    async def delete(self, session_id: SessionId) -> None:
        """Destroy a session."""
        self._sessions.pop(session_id, None)

    async def purge_expired(self) -> int:
        """Remove expired sessions."""
        expired = [sid for sid, s in self._sessions.items() if s.is_expired()]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)
