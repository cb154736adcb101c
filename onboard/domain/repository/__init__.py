"""Repository interfaces for the onboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from onboard.domain.repository.account import AccountRepository

__all__ = [
    "AccountRepository",
]
