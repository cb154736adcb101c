"""Account repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from onboard.domain.model.account import Account
from onboard.domain.value import AccountId, Email


class AccountRepository(ABC):
    """Repository for Account aggregate.

    The two mutating transitions are compare-and-set operations: they must be
    atomic with respect to concurrent callers for the same account.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def mark_email_verified(self, account_id: AccountId, email: Email) -> bool:
        """Atomically flag the email as verified.

        Only applies while the account's email still equals ``email`` and
        is not yet verified.

        Args:
            account_id: The account's unique identifier
            email: Email address being verified

        Returns:
            True if this call performed the transition, False otherwise
        """
        pass

    @abstractmethod
    async def replace_password(
        self,
        account_id: AccountId,
        expected_hash: Optional[str],
        new_hash: str,
        changed_at: datetime,
    ) -> bool:
        """Atomically replace the password hash.

        Only applies while the stored hash still equals ``expected_hash``.
        Of two concurrent callers with the same expectation, one wins.

        Args:
            account_id: The account's unique identifier
            expected_hash: Hash the caller observed (None when unset)
            new_hash: Hash of the new password
            changed_at: Timestamp of the change

        Returns:
            True if this call performed the replacement, False otherwise
        """
        pass
