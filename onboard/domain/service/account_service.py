"""Account domain service.

Implements the two transitions an invitation authorizes:

    EmailUnverified/PasswordUnset
        -> EmailVerified/PasswordUnset   (verify_email, idempotent)
        -> EmailVerified/PasswordSet     (change_password, once, terminal)

Consumption is detected from the token's password fingerprint claim: once a
password has been set, the stored hash no longer matches it.
"""

import asyncio
from datetime import datetime, timezone

import bcrypt
import logfire
from pydantic import BaseModel

from onboard.config import PasswordSettings
from onboard.domain.error import AccountNotFoundError
from onboard.domain.model.account import Account
from onboard.domain.repository import AccountRepository
from onboard.domain.value import (
    AccountId,
    ChangePasswordStatus,
    Email,
    VerifyEmailStatus,
)
from onboard.util.jwt import InvitationClaims

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class EmailVerification(BaseModel):
    """Outcome of an email verification attempt."""

    status: VerifyEmailStatus
    account_id: AccountId


class PasswordChange(BaseModel):
    """Outcome of a password set attempt."""

    status: ChangePasswordStatus
    account_id: AccountId
    redirect_url: str | None = None
    detail: str | None = None


class AccountService:
    """Domain service for invitation-driven account transitions."""

    def __init__(
        self, account_repository: AccountRepository, password_settings: PasswordSettings
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            password_settings: Password policy settings
        """
        self.account_repository = account_repository
        self.password_settings = password_settings

    async def verify_email(self, claims: InvitationClaims) -> EmailVerification:
        """Apply the email verification an invitation authorizes.

        Args:
            claims: Verified invitation claims

        Returns:
            Verification outcome

        Raises:
            AccountNotFoundError: If the invited account doesn't exist
        """
        account_id = AccountId(claims.subject)
        with logfire.span("account_service.verify_email", account_id=str(account_id)):
            account = await self._get_account(account_id)

            status = self._check_invitation(account, claims)
            if status is None and account.email_verified:
                status = VerifyEmailStatus.ALREADY_VERIFIED

            if status is None:
                updated = await self.account_repository.mark_email_verified(
                    account_id, account.email
                )
                if updated:
                    status = VerifyEmailStatus.VERIFIED
                else:
                    # Lost a race; classify against the fresh state
                    account = await self._get_account(account_id)
                    status = (
                        self._check_invitation(account, claims)
                        or VerifyEmailStatus.ALREADY_VERIFIED
                    )

            logfire.info(
                "Email verification applied",
                account_id=str(account_id),
                status=status.value,
            )
            return EmailVerification(status=status, account_id=account_id)

    async def change_password(
        self, claims: InvitationClaims, plaintext: str
    ) -> PasswordChange:
        """Apply the password set an invitation authorizes.

        Args:
            claims: Verified invitation claims
            plaintext: Candidate password

        Returns:
            Password change outcome, with the invitation's callback on success

        Raises:
            AccountNotFoundError: If the invited account doesn't exist
        """
        account_id = AccountId(claims.subject)
        with logfire.span(
            "account_service.change_password", account_id=str(account_id)
        ):
            account = await self._get_account(account_id)

            if self._check_invitation(account, claims) is not None:
                logfire.info("Invitation already consumed", account_id=str(account_id))
                return PasswordChange(
                    status=ChangePasswordStatus.ALREADY_CONSUMED,
                    account_id=account_id,
                )

            problem = self.validate_password(plaintext)
            if problem is not None:
                logfire.info("Password rejected by policy", account_id=str(account_id))
                return PasswordChange(
                    status=ChangePasswordStatus.INVALID_PASSWORD,
                    account_id=account_id,
                    detail=problem,
                )

            new_hash = await asyncio.to_thread(self.hash_password, plaintext)
            replaced = await self.account_repository.replace_password(
                account_id,
                expected_hash=account.password_hash,
                new_hash=new_hash,
                changed_at=datetime.now(timezone.utc),
            )
            if not replaced:
                logfire.info(
                    "Concurrent password change won the race",
                    account_id=str(account_id),
                )
                return PasswordChange(
                    status=ChangePasswordStatus.ALREADY_CONSUMED,
                    account_id=account_id,
                )

            logfire.info(
                "Password set through invitation",
                account_id=str(account_id),
                has_callback=claims.callback is not None,
            )
            return PasswordChange(
                status=ChangePasswordStatus.CHANGED,
                account_id=account_id,
                redirect_url=claims.callback,
            )

    def validate_password(self, plaintext: str) -> str | None:
        """Check a candidate password against the policy.

        Returns:
            Description of the violated rule, or None if acceptable
        """
        if len(plaintext) < self.password_settings.min_length:
            return (
                f"Please choose a password which is at least "
                f"{self.password_settings.min_length} characters."
            )
        if len(plaintext.encode("utf-8")) > BCRYPT_MAX_BYTES:
            return f"Please choose a password which is at most {BCRYPT_MAX_BYTES} bytes."
        return None

    def hash_password(self, plaintext: str) -> str:
        """Hash a password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self.password_settings.bcrypt_rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    async def _get_account(self, account_id: AccountId) -> Account:
        account = await self.account_repository.find_by_id(account_id)
        if account is None:
            logfire.error("Invited account not found", account_id=str(account_id))
            raise AccountNotFoundError(str(account_id))
        return account

    @staticmethod
    def _check_invitation(
        account: Account, claims: InvitationClaims
    ) -> VerifyEmailStatus | None:
        """Check whether the invitation still has authority over the account.

        Returns:
            The blocking status, or None if the invitation is still live
        """
        if account.email.root != claims.email.strip().lower():
            return VerifyEmailStatus.EMAIL_MISMATCH
        if account.password_fingerprint != claims.password_fingerprint:
            return VerifyEmailStatus.ALREADY_CONSUMED
        return None
