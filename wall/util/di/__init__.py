"""Dependency injection module.

Providers are grouped by layer. Infrastructure components (``persistence``,
``realtime``) have a production and a mock implementation; everything else
is concrete.
"""

from typing import Type

from wall.util.di.application import ProdApplicationProvider
from wall.util.di.base import Component, ProviderBase
from wall.util.di.core import ProdConfigProvider
from wall.util.di.domain import ProdDomainProvider
from wall.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    RealtimeProvider,
)
from wall.util.error import DependencyInjectionError

# Order is irrelevant to dishka; grouped for reading
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    RealtimeProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class that should be instantiated.

    A base with no subclasses is concrete and returned unchanged. A base with
    subclasses is a mockable component; the subclass whose ``__is_mock__``
    matches ``use_mock`` is returned. Mock subclasses live under ``tests/di``
    and only exist once that package is imported.

    Raises:
        DependencyInjectionError: If no matching implementation is registered
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "RealtimeProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
]
