"""Domain model entities for onboard."""

from onboard.domain.model.account import Account, password_fingerprint

__all__ = [
    "Account",
    "password_fingerprint",
]
