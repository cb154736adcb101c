"""Flow outcomes returned to the presentation layer.

Every request through the invitation flow ends in exactly one of:

- ShowForm: the password form, bound to the token
- Success: password set, optionally with a redirect target
- RecoverableError: bad input, show the form again with the same token
- TerminalError: nothing more this link can do
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class StatusClass(str, Enum):
    """HTTP status class of an outcome."""

    OK = "ok"
    BAD_REQUEST = "bad_request"
    INTERNAL_ERROR = "internal_error"


class FlowOutcome(BaseModel):
    """Base class for invitation flow outcomes."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    message: str | None = None
    token: str | None = None
    redirect_url: str | None = None
    status: StatusClass = StatusClass.OK

    @property
    def show_form(self) -> bool:
        """Whether the password form should be rendered."""
        return self.token is not None


class ShowForm(FlowOutcome):
    """Show the password form bound to the token."""

    token: str


class Success(FlowOutcome):
    """The password has been set."""

    title: str = "Password Set"
    message: str = "Your password has been set."


class RecoverableError(FlowOutcome):
    """The input was rejected; the same token may be resubmitted."""

    title: str
    message: str
    token: str
    status: StatusClass = StatusClass.BAD_REQUEST


class TerminalError(FlowOutcome):
    """The flow cannot continue with this link."""

    title: str
    message: str
    status: StatusClass = StatusClass.BAD_REQUEST


KEYS_UNAVAILABLE = TerminalError(
    title="There's been an error processing your request.",
    message="Please try again later.",
    status=StatusClass.INTERNAL_ERROR,
)

BAD_INVITATION_TOKEN = TerminalError(
    title="Bad Invitation Token",
    message="Your invitation could not be verified.",
)

INVALID_INVITATION_LINK = TerminalError(
    title="Invalid Invitation Link",
    message="Your email does not match the email address on file.",
)

# There is no way to request a new invitation from this flow.
INVITATION_LINK_EXPIRED = TerminalError(
    title="Link Expired",
    message="Your invitation link is no longer valid. Please request a new one.",
)

PASSWORD_LINK_EXPIRED = TerminalError(
    title="Link Expired",
    message=(
        "The invitation is no longer valid. If you need to change your "
        "password, generate a new password change email."
    ),
)

PROCESSING_ERROR = TerminalError(
    title="Error Processing Request",
    message="Please try again later.",
    status=StatusClass.INTERNAL_ERROR,
)
