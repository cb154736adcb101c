"""Invitation token domain service."""

import jwt
import logfire

from onboard.config import AuthSettings
from onboard.domain.error import KeyRetrievalError
from onboard.util.jwt import InvitationClaims, TokenError, verify_invitation_token


class KeySource:
    """Source of the public keys currently trusted to sign invitations."""

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        """Return the currently trusted public keys.

        Returns:
            Trusted public keys

        Raises:
            KeyRetrievalError: If the keys cannot be obtained
        """
        raise NotImplementedError


class InvitationTokenService:
    """Domain service for invitation token verification.

    Key retrieval and token validation are separate steps: a key outage is
    an infrastructure fault, a bad token is the caller's problem.
    """

    def __init__(self, key_source: KeySource, auth_settings: AuthSettings) -> None:
        """Initialize invitation token service.

        Args:
            key_source: Source of trusted signing keys
            auth_settings: Authentication settings
        """
        self.key_source = key_source
        self.auth_settings = auth_settings

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        """Fetch the trusted public keys.

        Returns:
            Trusted public keys

        Raises:
            KeyRetrievalError: If the keys cannot be obtained
        """
        with logfire.span("token_service.get_trusted_keys"):
            try:
                keys = await self.key_source.get_trusted_keys()
            except KeyRetrievalError:
                raise
            except Exception as e:
                raise KeyRetrievalError(f"Key source failed: {e}") from e

            if not keys:
                raise KeyRetrievalError("Key source returned no keys")

            logfire.debug("Trusted keys retrieved", count=len(keys))
            return keys

    def verify_token(self, token: str, keys: list[jwt.PyJWK]) -> InvitationClaims:
        """Verify an invitation token against the given keys.

        Args:
            token: Encoded invitation token
            keys: Trusted public keys

        Returns:
            Verified invitation claims

        Raises:
            TokenError: If token is invalid or expired
        """
        with logfire.span("token_service.verify_token", token=token[:8] + "..."):
            try:
                claims = verify_invitation_token(
                    token,
                    issuer=self.auth_settings.issuer_url,
                    keys=keys,
                    algorithms=self.auth_settings.algorithms,
                    leeway=self.auth_settings.leeway_seconds,
                )
            except TokenError as e:
                logfire.debug("Invitation token rejected", error=str(e))
                raise

            logfire.debug(
                "Invitation token verified",
                account_id=str(claims.subject),
                expires_at=claims.expires_at.isoformat(),
            )
            return claims
