"""Domain value objects for onboard."""

from onboard.domain.value.identifiers import AccountId
from onboard.domain.value.types import ChangePasswordStatus, Email, VerifyEmailStatus

__all__ = [
    # Identifiers
    "AccountId",
    # Types
    "ChangePasswordStatus",
    "Email",
    "VerifyEmailStatus",
]
