"""Value types for accounts and the statuses of invitation transitions."""

from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator


class Email(RootModel[str]):
    """Email address, normalized to lowercase without surrounding whitespace.

    Access the address via .root; dumps as a plain string.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and sanity-check the address."""
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("Email must contain a local part and a domain")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v

    def __str__(self) -> str:
        return self.root


class VerifyEmailStatus(str, Enum):
    """Result of applying an invitation's email verification."""

    VERIFIED = "verified"
    ALREADY_VERIFIED = "already_verified"
    EMAIL_MISMATCH = "email_mismatch"
    ALREADY_CONSUMED = "already_consumed"


class ChangePasswordStatus(str, Enum):
    """Result of applying an invitation's password set."""

    CHANGED = "changed"
    ALREADY_CONSUMED = "already_consumed"
    INVALID_PASSWORD = "invalid_password"
