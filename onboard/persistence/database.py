"""Async engine and session factory for the account store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from onboard.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every statement (debug only)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions are flushed explicitly by the repository and committed per request."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
