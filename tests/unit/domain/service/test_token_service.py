"""Unit tests for InvitationTokenService."""

from uuid import uuid4

import pytest

from onboard.config import AuthSettings
from onboard.domain.error import KeyRetrievalError
from onboard.domain.model import Account
from onboard.domain.service import InvitationTokenService, KeySource
from onboard.domain.value import AccountId, Email
from onboard.util.jwt import TokenError
from tests.harness import create_env_fixture
from tests.tokens import sign_invitation

# Unit test fixture
unit_env = create_env_fixture()


class BrokenKeySource(KeySource):
    """Key source whose backend fails with an unexpected error."""

    async def get_trusted_keys(self):
        raise RuntimeError("connection reset")


class EmptyKeySource(KeySource):
    async def get_trusted_keys(self):
        return []


class TestInvitationTokenService:
    """Tests for InvitationTokenService."""

    @pytest.mark.asyncio
    async def test_verifies_token_with_trusted_keys(self, unit_env):
        service = await unit_env.get(InvitationTokenService)
        account = Account(id=AccountId(uuid4()), email=Email("a@example.com"))

        keys = await service.get_trusted_keys()
        claims = service.verify_token(sign_invitation(account), keys)

        assert claims.subject == account.id

    @pytest.mark.asyncio
    async def test_bad_token_raises_token_error(self, unit_env):
        service = await unit_env.get(InvitationTokenService)
        keys = await service.get_trusted_keys()

        with pytest.raises(TokenError):
            service.verify_token("abc.def.ghi", keys)

    @pytest.mark.asyncio
    async def test_unexpected_key_source_failure_wrapped(self):
        service = InvitationTokenService(
            key_source=BrokenKeySource(),
            auth_settings=AuthSettings(issuer_url="http://localhost:8000"),
        )

        with pytest.raises(KeyRetrievalError, match="connection reset"):
            await service.get_trusted_keys()

    @pytest.mark.asyncio
    async def test_empty_key_set_is_an_outage(self):
        service = InvitationTokenService(
            key_source=EmptyKeySource(),
            auth_settings=AuthSettings(issuer_url="http://localhost:8000"),
        )

        with pytest.raises(KeyRetrievalError, match="no keys"):
            await service.get_trusted_keys()
