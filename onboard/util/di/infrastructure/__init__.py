"""Infrastructure providers."""

# Import bases
from .keys import KeysProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .keys import ProdKeysProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "KeysProvider",
    "PersistenceProvider",
    "ProdKeysProvider",
    "ProdPersistenceProvider",
]
