"""Strongly typed identifiers for onboard domain entities."""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
