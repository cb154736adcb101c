"""Invitation use cases."""

from onboard.application.usecase.invitation.outcome import (
    FlowOutcome,
    RecoverableError,
    ShowForm,
    StatusClass,
    Success,
    TerminalError,
)
from onboard.application.usecase.invitation.set_password import (
    SetPasswordRequest,
    SetPasswordUseCase,
)
from onboard.application.usecase.invitation.view_invitation import (
    ViewInvitationRequest,
    ViewInvitationUseCase,
)

__all__ = [
    "FlowOutcome",
    "RecoverableError",
    "SetPasswordRequest",
    "SetPasswordUseCase",
    "ShowForm",
    "StatusClass",
    "Success",
    "TerminalError",
    "ViewInvitationRequest",
    "ViewInvitationUseCase",
]
