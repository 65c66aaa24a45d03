"""Async PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings

APPLICATION_NAME = "blog-backend"


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``DATABASE__URL`` sized by the database settings.

    SQL is echoed when ``DEBUG`` is on.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """One session per request; the DI provider commits or rolls back.

    Posts are returned as domain models, so loaded rows need not survive
    the commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
