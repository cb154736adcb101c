"""Spies shared by the invitation use case tests."""

import jwt

from onboard.domain.error import KeyRetrievalError
from onboard.domain.service import KeySource
from onboard.persistence.repository.inmemory import InMemoryAccountRepository
from onboard.util.jwt import InvitationClaims


class RecordingAccountRepository(InMemoryAccountRepository):
    """In-memory repository that counts every call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    async def find_by_id(self, account_id):
        self.calls.append("find_by_id")
        return await super().find_by_id(account_id)

    async def mark_email_verified(self, account_id, email):
        self.calls.append("mark_email_verified")
        return await super().mark_email_verified(account_id, email)

    async def replace_password(self, account_id, expected_hash, new_hash, changed_at):
        self.calls.append("replace_password")
        return await super().replace_password(
            account_id, expected_hash, new_hash, changed_at
        )


class UnavailableKeySource(KeySource):
    """Key source for an issuer that cannot be reached."""

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        raise KeyRetrievalError("JWKS request failed: 503")


class SpyTokenService:
    """Token service wrapper recording whether validation was attempted."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.verify_calls = 0

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        return await self.inner.get_trusted_keys()

    def verify_token(self, token: str, keys: list[jwt.PyJWK]) -> InvitationClaims:
        self.verify_calls += 1
        return self.inner.verify_token(token, keys)
