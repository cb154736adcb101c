"""Mock signing key providers for testing."""

from dishka import Scope, provide

from onboard.adapter.jwks import MockJWKSKeySource
from onboard.domain.service import KeySource
from onboard.util.di.infrastructure.keys import KeysProvider
from tests.tokens import TEST_JWKS


class MockKeysProvider(KeysProvider):
    """Mock keys provider serving the test key set."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_key_source(self) -> KeySource:
        """Provide mock key source."""
        return MockJWKSKeySource(TEST_JWKS)
