"""Dependency injection module."""

from typing import Iterable

from onboard.util.di.application import ProdApplicationProvider
from onboard.util.di.base import Component, ProviderBase
from onboard.util.di.core import ProdConfigProvider
from onboard.util.di.domain import ProdDomainProvider
from onboard.util.di.infrastructure import (
    KeysProvider,
    PersistenceProvider,
    ProdKeysProvider,
    ProdPersistenceProvider,
)

# Order is irrelevant to dishka; grouped by layer for reading
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    KeysProvider,
    PersistenceProvider,
]

COMPONENTS: frozenset[Component] = frozenset(
    p.__mock_component__ for p in PROVIDERS if p.__mock_component__
)


def select_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per slot, mocking the named components.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Provider instances ready for make_async_container

    Raises:
        ValueError: If an unknown component is named
    """
    mocked = set(mocked)
    unknown = mocked - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "select_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "KeysProvider",
    "PersistenceProvider",
    "ProdKeysProvider",
    "ProdPersistenceProvider",
]
