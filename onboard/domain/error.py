"""Domain layer errors.

Expected refusals (mismatched email, consumed invitation, weak password) are
statuses, not exceptions. What is raised here means the flow cannot decide.
"""


class DomainError(Exception):
    """Base domain error."""


class AccountNotFoundError(DomainError):
    """The account named by a valid invitation does not exist."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class KeyRetrievalError(DomainError):
    """The trusted signing keys could not be obtained."""
