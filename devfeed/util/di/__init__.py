"""Dependency injection wiring for the devfeed API."""

from typing import Type

from devfeed.util.di.application import ProdApplicationProvider
from devfeed.util.di.base import Component, ProviderBase
from devfeed.util.di.core import ProdConfigProvider
from devfeed.util.di.domain import ProdDomainProvider
from devfeed.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from devfeed.util.error import DependencyInjectionError

# Concrete providers first, then mockable component bases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    A concrete provider resolves to itself and ``use_mock`` is ignored. A
    mockable base resolves to the subclass whose ``__is_mock__`` equals
    ``use_mock``.

    Raises:
        DependencyInjectionError: If the requested implementation is not
            registered (mock subclasses live in tests and must be imported)
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation registered for {base.__mock_component__!r}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
