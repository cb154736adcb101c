"""Application layer DI providers."""

from dishka import Scope, provide

from onboard.application.usecase.invitation import (
    SetPasswordUseCase,
    ViewInvitationUseCase,
)
from onboard.domain.service import AccountService, InvitationTokenService
from onboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_view_invitation_use_case(
        self,
        token_service: InvitationTokenService,
        account_service: AccountService,
    ) -> ViewInvitationUseCase:
        """Provide view invitation use case."""
        return ViewInvitationUseCase(
            token_service=token_service, account_service=account_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_password_use_case(
        self,
        token_service: InvitationTokenService,
        account_service: AccountService,
    ) -> SetPasswordUseCase:
        """Provide set password use case."""
        return SetPasswordUseCase(
            token_service=token_service, account_service=account_service
        )
