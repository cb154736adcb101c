"""Token authorization step shared by both invitation use cases."""

from abc import ABC, abstractmethod

import logfire

from onboard.application.usecase.invitation.outcome import (
    BAD_INVITATION_TOKEN,
    KEYS_UNAVAILABLE,
    TerminalError,
)
from onboard.domain.error import KeyRetrievalError
from onboard.domain.service import AccountService, InvitationTokenService
from onboard.util.jwt import InvitationClaims, TokenError


class InvitationUseCase(ABC):
    """Base for use cases driven by an invitation token.

    Holds no state between requests: the token is re-verified every time.
    """

    def __init__(
        self, token_service: InvitationTokenService, account_service: AccountService
    ) -> None:
        """Initialize invitation use case.

        Args:
            token_service: Invitation token domain service
            account_service: Account domain service
        """
        self.token_service = token_service
        self.account_service = account_service

    @abstractmethod
    async def execute(self, request):
        """Run the use case for one request."""

    async def authorize(self, token: str) -> InvitationClaims | TerminalError:
        """Verify the token against the currently trusted keys.

        Args:
            token: Encoded invitation token

        Returns:
            Verified claims, or the terminal outcome to show instead
        """
        try:
            keys = await self.token_service.get_trusted_keys()
        except KeyRetrievalError as e:
            logfire.error("Internal error getting public keys", error=str(e))
            return KEYS_UNAVAILABLE

        try:
            return self.token_service.verify_token(token, keys)
        except TokenError as e:
            logfire.debug("Invalid invitation token", error=str(e))
            return BAD_INVITATION_TOKEN
