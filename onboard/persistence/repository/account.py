"""PostgreSQL implementation of Account repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.model import Account
from onboard.domain.repository import AccountRepository
from onboard.domain.value import AccountId, Email
from onboard.persistence.mappers import account_to_dict, row_to_account
from onboard.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository.

    Transitions are single conditional UPDATE statements; the row lock taken
    by the UPDATE serializes concurrent callers and the affected row count
    tells each caller whether it won.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Args:
            account: Account to save

        Returns:
            Saved account
        """
        existing = await self.find_by_id(account.id)

        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = accounts_table.insert().values(**account_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return account

    async def mark_email_verified(self, account_id: AccountId, email: Email) -> bool:
        """Atomically flag the email as verified.

        Args:
            account_id: Account ID
            email: Email address being verified

        Returns:
            True if the row was updated
        """
        stmt = (
            update(accounts_table)
            .where(accounts_table.c.id == account_id)
            .where(accounts_table.c.email == email.root)
            .where(accounts_table.c.email_verified.is_(False))
            .values(email_verified=True, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def replace_password(
        self,
        account_id: AccountId,
        expected_hash: Optional[str],
        new_hash: str,
        changed_at: datetime,
    ) -> bool:
        """Atomically replace the password hash if it is still the expected one.

        Args:
            account_id: Account ID
            expected_hash: Hash observed by the caller (None when unset)
            new_hash: New password hash
            changed_at: Timestamp of the change

        Returns:
            True if the row was updated
        """
        if expected_hash is None:
            current_matches = accounts_table.c.password_hash.is_(None)
        else:
            current_matches = accounts_table.c.password_hash == expected_hash

        stmt = (
            update(accounts_table)
            .where(accounts_table.c.id == account_id)
            .where(current_matches)
            .values(
                password_hash=new_hash,
                password_changed_at=changed_at,
                updated_at=func.now(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
