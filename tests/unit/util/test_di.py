"""Unit tests for provider resolution and container wiring."""

import pytest

from knowspace.config import AuthSettings, Settings
from knowspace.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from tests.di import build_test_container
from tests.di.persistence import MockPersistenceProvider


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_as_is(self):
        assert ProdConfigProvider.is_mockable() is False
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_component_resolves_by_mock_flag(self):
        assert PersistenceProvider.is_mockable() is True
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_serves_given_settings(self):
        settings = Settings(auth=AuthSettings(jwt_secret="container-secret"))
        container = build_test_container(settings=settings)

        try:
            assert await container.get(Settings) is settings
            auth = await container.get(AuthSettings)
            assert auth.jwt_secret == "container-secret"
        finally:
            await container.close()
