"""Dependency injection module."""

from typing import Type

from knowspace.util.di.application import ProdApplicationProvider
from knowspace.util.di.base import Component, ProviderBase
from knowspace.util.di.core import ProdConfigProvider
from knowspace.util.di.domain import ProdDomainProvider
from knowspace.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider listed in PROVIDERS to the class to instantiate.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    if not base.is_mockable():
        return base

    impl = base.implementation(use_mock)

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
]
