"""Mock persistence providers for testing."""

from dishka import Scope, provide

from onboard.domain.repository import AccountRepository
from onboard.persistence.repository.inmemory import InMemoryAccountRepository
from onboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope so state survives across requests made through one app;
    each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()
