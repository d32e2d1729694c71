"""Dependency injection module.

Providers are either concrete (config, domain, application) or a mockable
component: an abstract base whose subclasses are the production and mock
implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from voteable.util.di.application import ProdApplicationProvider
from voteable.util.di.base import Component, ProviderBase
from voteable.util.di.core import ProdConfigProvider
from voteable.util.di.domain import ProdDomainProvider
from voteable.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from voteable.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """A provider is a mockable component when it has implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching
        implementation

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    component = getattr(base, "__mock_component__", None) or base.__name__
    flavour = "mock" if use_mock else "production"
    raise DependencyInjectionError(f"No {flavour} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
