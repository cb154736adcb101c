"""Domain services."""

from .account_service import (
    AccountService,
    EmailVerification,
    PasswordChange,
)
from .token_service import InvitationTokenService, KeySource

__all__ = [
    "AccountService",
    "EmailVerification",
    "InvitationTokenService",
    "KeySource",
    "PasswordChange",
]
