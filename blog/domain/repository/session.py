"""Admin session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.session import AdminSession
from blog.domain.value import SessionId


class SessionRepository(ABC):
    """Server-side store for admin sessions."""

    @abstractmethod
    async def find_by_id(self, session_id: SessionId) -> Optional[AdminSession]:
        """Find a live session.

        Returns:
            The session, or None if it does not exist or has expired
        """
        pass

    @abstractmethod
    async def save(self, session: AdminSession) -> AdminSession:
        """Create or replace a session."""
        pass

    @abstractmethod
    async def delete(self, session_id: SessionId) -> None:
        """Destroy a session if it exists."""
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """Remove expired sessions.

        Returns:
            Number of sessions removed
        """
        pass
