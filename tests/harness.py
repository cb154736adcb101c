"""Fixture factory shared by unit and integration tests."""

import pytest_asyncio

from onboard.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped container.

    Each test gets a fresh container, so in-memory accounts never leak
    between tests. Components in ``unmock`` use their production
    implementation; "persistence" then needs a migrated PostgreSQL at
    DATABASE__URL.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_verify_email(unit_env):
            service = await unit_env.get(AccountService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env
