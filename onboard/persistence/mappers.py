"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from onboard.domain.model import Account
from onboard.domain.value import AccountId, Email


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        email=Email(row["email"]),
        email_verified=row["email_verified"],
        password_hash=row.get("password_hash"),
        password_changed_at=row.get("password_changed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return account.model_dump()
