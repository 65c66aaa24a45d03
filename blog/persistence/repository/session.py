"""PostgreSQL implementation of the admin session repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import AdminSession
from blog.domain.repository.session import SessionRepository
from blog.domain.value import SessionId
from blog.persistence.mappers import row_to_session, session_to_dict
from blog.persistence.tables import admin_sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, session_id: SessionId) -> Optional[AdminSession]:
        """Find a session that has not expired."""
        stmt = select(admin_sessions_table).where(
            admin_sessions_table.c.id == session_id,
            admin_sessions_table.c.expires_at > func.now(),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None

        return row_to_session(row._asdict())

    async def save(self, session: AdminSession) -> AdminSession:
        """Insert or replace a session."""
        values = session_to_dict(session)
        stmt = insert(admin_sessions_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[admin_sessions_table.c.id],
            set_={
                "is_authenticated": stmt.excluded.is_authenticated,
                "expires_at": stmt.excluded.expires_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return session

    async def delete(self, session_id: SessionId) -> None:
        """Destroy a session."""
        stmt = admin_sessions_table.delete().where(
            admin_sessions_table.c.id == session_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def purge_expired(self) -> int:
        """Remove expired sessions."""
        stmt = admin_sessions_table.delete().where(
            admin_sessions_table.c.expires_at <= func.now()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        removed = result.rowcount or 0
        if removed:
            logfire.info("Expired sessions purged", count=removed)
        return removed
