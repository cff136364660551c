"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from knowspace.config import Settings
from knowspace.util.di import PROVIDERS, ProdConfigProvider, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    Args:
        settings: Settings to serve; loaded from the environment when None

    Returns:
        Container with Postgres persistence and all services and use cases
    """
    providers = [
        get_provider(base, use_mock=False)()
        for base in PROVIDERS
        if base is not ProdConfigProvider
    ]
    return make_async_container(
        ProdConfigProvider(settings), *providers, FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can resolve ``FromDishka``."""
    setup_dishka(container, app)
