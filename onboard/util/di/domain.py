"""Domain layer DI providers."""

from dishka import Scope, provide

from onboard.config import AuthSettings, PasswordSettings
from onboard.domain.repository import AccountRepository
from onboard.domain.service import AccountService, InvitationTokenService, KeySource
from onboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        password_settings: PasswordSettings,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            password_settings=password_settings,
        )

    @provide
    def get_invitation_token_service(
        self, key_source: KeySource, auth_settings: AuthSettings
    ) -> InvitationTokenService:
        """Provide invitation token domain service."""
        return InvitationTokenService(
            key_source=key_source, auth_settings=auth_settings
        )
