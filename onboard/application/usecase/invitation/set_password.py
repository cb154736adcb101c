"""Set password use case."""

from typing import Callable

import logfire
from pydantic import BaseModel

from onboard.application.usecase.invitation.base import InvitationUseCase
from onboard.application.usecase.invitation.outcome import (
    PASSWORD_LINK_EXPIRED,
    PROCESSING_ERROR,
    FlowOutcome,
    RecoverableError,
    Success,
    TerminalError,
)
from onboard.domain.service import PasswordChange
from onboard.domain.value import ChangePasswordStatus


def _changed(token: str, change: PasswordChange) -> FlowOutcome:
    return Success(redirect_url=change.redirect_url)


def _already_consumed(token: str, change: PasswordChange) -> FlowOutcome:
    return PASSWORD_LINK_EXPIRED


def _invalid_password(token: str, change: PasswordChange) -> FlowOutcome:
    return RecoverableError(
        title="Invalid Password",
        message=change.detail or "Please choose a different password.",
        token=token,
    )


PASSWORD_CHANGE_OUTCOMES: dict[
    ChangePasswordStatus, Callable[[str, PasswordChange], FlowOutcome]
] = {
    ChangePasswordStatus.CHANGED: _changed,
    ChangePasswordStatus.ALREADY_CONSUMED: _already_consumed,
    ChangePasswordStatus.INVALID_PASSWORD: _invalid_password,
}


class SetPasswordRequest(BaseModel):
    """Set password request."""

    token: str = ""
    password: str = ""


class SetPasswordUseCase(InvitationUseCase):
    """Use case for choosing a password through an invitation.

    Succeeds at most once per invitation. The redirect target, if any,
    is only signalled; the caller performs the redirect.
    """

    async def execute(self, request: SetPasswordRequest) -> FlowOutcome:
        """Set the invitee's password.

        Args:
            request: Request with the invitation token and candidate password

        Returns:
            Success, RecoverableError for a policy violation, or TerminalError
        """
        with logfire.span("set_password.execute", token=request.token[:8] + "..."):
            claims = await self.authorize(request.token)
            if isinstance(claims, TerminalError):
                return claims

            try:
                change = await self.account_service.change_password(
                    claims, request.password
                )
            except Exception as e:
                logfire.error(
                    "Internal error changing password",
                    account_id=str(claims.subject),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return PROCESSING_ERROR

            if change.status != ChangePasswordStatus.CHANGED:
                logfire.debug(
                    "Password change refused",
                    account_id=str(claims.subject),
                    status=change.status.value,
                )

            return PASSWORD_CHANGE_OUTCOMES[change.status](request.token, change)
