"""Unit tests for ViewInvitationUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from onboard.adapter.jwks import MockJWKSKeySource
from onboard.application.usecase.invitation import (
    ShowForm,
    StatusClass,
    TerminalError,
    ViewInvitationRequest,
    ViewInvitationUseCase,
)
from onboard.config import PasswordSettings, Settings
from onboard.domain.model import Account
from onboard.domain.repository import AccountRepository
from onboard.domain.service import AccountService, InvitationTokenService
from onboard.domain.value import AccountId, Email
from tests.fakes import RecordingAccountRepository, SpyTokenService, UnavailableKeySource
from tests.harness import create_env_fixture
from tests.tokens import TEST_JWKS, generate_ec_key, sign_invitation

# Unit test fixture
unit_env = create_env_fixture()


async def invited_account(repo: AccountRepository, **fields) -> Account:
    values = {"id": AccountId(uuid4()), "email": Email("invitee@example.com")}
    values.update(fields)
    return await repo.save(Account(**values))


def build_use_case(repo: AccountRepository, key_source=None) -> ViewInvitationUseCase:
    settings = Settings()
    return ViewInvitationUseCase(
        token_service=InvitationTokenService(
            key_source=key_source or MockJWKSKeySource(TEST_JWKS),
            auth_settings=settings.auth,
        ),
        account_service=AccountService(
            account_repository=repo,
            password_settings=PasswordSettings(bcrypt_rounds=4),
        ),
    )


class TestViewInvitationUseCase:
    """Tests for ViewInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_valid_invitation_verifies_email_and_shows_form(self, unit_env):
        use_case = await unit_env.get(ViewInvitationUseCase)
        repo = await unit_env.get(AccountRepository)
        account = await invited_account(repo)
        token = sign_invitation(account)

        outcome = await use_case.execute(ViewInvitationRequest(token=token))

        assert isinstance(outcome, ShowForm)
        assert outcome.token == token
        assert outcome.status == StatusClass.OK
        assert (await repo.find_by_id(account.id)).email_verified is True

    @pytest.mark.asyncio
    async def test_viewing_twice_shows_form_both_times(self, unit_env):
        use_case = await unit_env.get(ViewInvitationUseCase)
        repo = await unit_env.get(AccountRepository)
        account = await invited_account(repo)
        token = sign_invitation(account)

        first = await use_case.execute(ViewInvitationRequest(token=token))
        second = await use_case.execute(ViewInvitationRequest(token=token))

        assert first == second
        assert isinstance(second, ShowForm)

    @pytest.mark.asyncio
    async def test_email_mismatch_is_invalid_link(self, unit_env):
        use_case = await unit_env.get(ViewInvitationUseCase)
        repo = await unit_env.get(AccountRepository)
        account = await invited_account(repo)
        token = sign_invitation(account, email="previous@example.com")

        outcome = await use_case.execute(ViewInvitationRequest(token=token))

        assert isinstance(outcome, TerminalError)
        assert outcome.title == "Invalid Invitation Link"
        assert outcome.status == StatusClass.BAD_REQUEST
        assert (await repo.find_by_id(account.id)).email_verified is False

    @pytest.mark.asyncio
    async def test_consumed_invitation_is_expired(self, unit_env):
        use_case = await unit_env.get(ViewInvitationUseCase)
        repo = await unit_env.get(AccountRepository)
        account = await invited_account(repo, email_verified=True)
        token = sign_invitation(account)
        await repo.save(account.model_copy(update={"password_hash": "$2b$04$x"}))

        outcome = await use_case.execute(ViewInvitationRequest(token=token))

        assert isinstance(outcome, TerminalError)
        assert outcome.title == "Link Expired"
        assert outcome.token is None

    @pytest.mark.asyncio
    async def test_unknown_account_is_processing_error(self, unit_env):
        use_case = await unit_env.get(ViewInvitationUseCase)
        ghost = Account(id=AccountId(uuid4()), email=Email("ghost@example.com"))

        outcome = await use_case.execute(
            ViewInvitationRequest(token=sign_invitation(ghost))
        )

        assert outcome.title == "Error Processing Request"
        assert outcome.status == StatusClass.INTERNAL_ERROR

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "token_factory",
        [
            lambda account: "",
            lambda account: "garbage",
            lambda account: sign_invitation(account, expires_in=timedelta(hours=-1)),
            lambda account: sign_invitation(account, issuer="https://other.example"),
        ],
        ids=["empty", "malformed", "expired", "foreign-issuer"],
    )
    async def test_bad_token_never_touches_store(self, token_factory):
        repo = RecordingAccountRepository()
        account = await invited_account(repo)
        use_case = build_use_case(repo)

        outcome = await use_case.execute(
            ViewInvitationRequest(token=token_factory(account))
        )

        assert outcome.title == "Bad Invitation Token"
        assert outcome.status == StatusClass.BAD_REQUEST
        assert repo.calls == []

    @pytest.mark.asyncio
    async def test_kid_of_non_rsa_key_is_bad_token(self):
        """A token naming an EC key from a mixed key set is a client error."""
        _, ec_jwk = generate_ec_key("ec-1")
        keys = MockJWKSKeySource({"keys": [ec_jwk, *TEST_JWKS["keys"]]})
        repo = RecordingAccountRepository()
        account = await invited_account(repo)
        use_case = build_use_case(repo, key_source=keys)

        outcome = await use_case.execute(
            ViewInvitationRequest(token=sign_invitation(account, kid="ec-1"))
        )

        assert outcome.title == "Bad Invitation Token"
        assert outcome.status == StatusClass.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_key_outage_skips_token_validation(self):
        repo = RecordingAccountRepository()
        account = await invited_account(repo)
        use_case = build_use_case(repo, key_source=UnavailableKeySource())
        spy = SpyTokenService(use_case.token_service)
        use_case.token_service = spy

        outcome = await use_case.execute(
            ViewInvitationRequest(token=sign_invitation(account))
        )

        assert isinstance(outcome, TerminalError)
        assert outcome.status == StatusClass.INTERNAL_ERROR
        assert outcome.message == "Please try again later."
        assert spy.verify_calls == 0
        assert repo.calls == []
