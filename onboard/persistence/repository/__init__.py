"""PostgreSQL repository implementations."""

from onboard.persistence.repository.account import PostgresAccountRepository

__all__ = [
    "PostgresAccountRepository",
]
