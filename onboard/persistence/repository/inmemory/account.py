"""In-memory account repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional

from onboard.domain.model.account import Account
from onboard.domain.repository.account import AccountRepository
from onboard.domain.value import AccountId, Email


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    A lock makes each conditional transition atomic across coroutines.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def save(self, account: Account) -> Account:
        """Save or update an account."""
        self._accounts[account.id] = account
        return account

    async def mark_email_verified(self, account_id: AccountId, email: Email) -> bool:
        """Flag the email as verified if it still matches and isn't yet."""
        async with self._lock:
            account = self._accounts.get(account_id)
            if not account or account.email != email or account.email_verified:
                return False
            self._accounts[account_id] = account.model_copy(
                update={"email_verified": True, "updated_at": datetime.now()}
            )
            return True

    async def replace_password(
        self,
        account_id: AccountId,
        expected_hash: Optional[str],
        new_hash: str,
        changed_at: datetime,
    ) -> bool:
        """Replace the password hash if it is still the expected one."""
        async with self._lock:
            account = self._accounts.get(account_id)
            if not account or account.password_hash != expected_hash:
                return False
            self._accounts[account_id] = account.model_copy(
                update={
                    "password_hash": new_hash,
                    "password_changed_at": changed_at,
                    "updated_at": datetime.now(),
                }
            )
            return True
