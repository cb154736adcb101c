"""View invitation use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.invitation.base import InvitationUseCase
from onboard.application.usecase.invitation.outcome import (
    INVALID_INVITATION_LINK,
    INVITATION_LINK_EXPIRED,
    PROCESSING_ERROR,
    FlowOutcome,
    ShowForm,
    TerminalError,
)
from onboard.domain.value import VerifyEmailStatus

# None means the flow continues to the password form.
EMAIL_VERIFICATION_OUTCOMES: dict[VerifyEmailStatus, TerminalError | None] = {
    VerifyEmailStatus.VERIFIED: None,
    # Already verified passes through: otherwise anyone who hits an error
    # after this point could never come back and set their password.
    VerifyEmailStatus.ALREADY_VERIFIED: None,
    VerifyEmailStatus.EMAIL_MISMATCH: INVALID_INVITATION_LINK,
    VerifyEmailStatus.ALREADY_CONSUMED: INVITATION_LINK_EXPIRED,
}


class ViewInvitationRequest(BaseModel):
    """View invitation request."""

    token: str = ""


class ViewInvitationUseCase(InvitationUseCase):
    """Use case for opening an invitation link.

    Verifies the invitee's email as a side effect, then offers the
    password form bound to the same token.
    """

    async def execute(self, request: ViewInvitationRequest) -> FlowOutcome:
        """Open an invitation.

        Args:
            request: Request with the invitation token

        Returns:
            ShowForm on success, otherwise a TerminalError
        """
        with logfire.span("view_invitation.execute", token=request.token[:8] + "..."):
            claims = await self.authorize(request.token)
            if isinstance(claims, TerminalError):
                return claims

            try:
                verification = await self.account_service.verify_email(claims)
            except Exception as e:
                logfire.error(
                    "Internal error verifying email",
                    account_id=str(claims.subject),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return PROCESSING_ERROR

            outcome = EMAIL_VERIFICATION_OUTCOMES[verification.status]
            if outcome is not None:
                logfire.debug(
                    "Email verification refused",
                    account_id=str(claims.subject),
                    status=verification.status.value,
                )
                return outcome

            return ShowForm(token=request.token)
