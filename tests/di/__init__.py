"""Mock providers for testing."""

from .keys import MockKeysProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockKeysProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
