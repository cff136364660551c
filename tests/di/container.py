"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from knowspace.config import Settings
from knowspace.persistence.repository.inmemory import InMemoryStore
from knowspace.util.di import PROVIDERS, Component, ProdConfigProvider, get_provider
from tests.di.persistence import MockPersistenceProvider


def build_test_container(
    unmock: set[Component] | None = None,
    store: InMemoryStore | None = None,
    settings: Settings | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        store: Backing store for the in-memory repositories, for tests
               that seed data before driving the API
        settings: Settings to serve; loaded from the environment when None

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Seed first, then drive the API over the same data
        store = InMemoryStore()
        container = build_test_container(store=store)
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = [ProdConfigProvider(settings)]
    for base in PROVIDERS:
        if base is ProdConfigProvider:
            continue

        use_mock = base.is_mockable() and base.__mock_component__ not in unmock
        provider_class = get_provider(base, use_mock=use_mock)

        if provider_class is MockPersistenceProvider:
            provider_instances.append(MockPersistenceProvider(store))
        else:
            provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    all_components = {
        p.__mock_component__
        for p in PROVIDERS
        if p.is_mockable() and p.__mock_component__
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
