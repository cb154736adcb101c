"""The status-to-outcome tables must cover every status."""

from onboard.application.usecase.invitation.outcome import (
    INVALID_INVITATION_LINK,
    INVITATION_LINK_EXPIRED,
)
from onboard.application.usecase.invitation.set_password import (
    PASSWORD_CHANGE_OUTCOMES,
)
from onboard.application.usecase.invitation.view_invitation import (
    EMAIL_VERIFICATION_OUTCOMES,
)
from onboard.domain.value import ChangePasswordStatus, VerifyEmailStatus


class TestOutcomeTables:
    """Exhaustiveness of the transition tables."""

    def test_every_verify_email_status_is_mapped(self):
        assert set(EMAIL_VERIFICATION_OUTCOMES) == set(VerifyEmailStatus)

    def test_every_change_password_status_is_mapped(self):
        assert set(PASSWORD_CHANGE_OUTCOMES) == set(ChangePasswordStatus)

    def test_already_verified_continues_to_form(self):
        """Revisiting a verified invitation must still offer the form."""
        assert EMAIL_VERIFICATION_OUTCOMES[VerifyEmailStatus.ALREADY_VERIFIED] is None
        assert EMAIL_VERIFICATION_OUTCOMES[VerifyEmailStatus.VERIFIED] is None

    def test_refusals_map_to_terminal_errors(self):
        assert (
            EMAIL_VERIFICATION_OUTCOMES[VerifyEmailStatus.EMAIL_MISMATCH]
            is INVALID_INVITATION_LINK
        )
        assert (
            EMAIL_VERIFICATION_OUTCOMES[VerifyEmailStatus.ALREADY_CONSUMED]
            is INVITATION_LINK_EXPIRED
        )
