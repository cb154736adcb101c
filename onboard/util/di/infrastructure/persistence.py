"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from onboard.config import Settings
from onboard.domain.repository import AccountRepository
from onboard.persistence.database import create_engine, create_session_factory
from onboard.persistence.repository import PostgresAccountRepository
from onboard.util.di.base import ProviderBase
from onboard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Account store component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Account store backed by PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """One engine per process, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        A transition the request performed is committed only if the request
        scope closes without an exception.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        return PostgresAccountRepository(session)
