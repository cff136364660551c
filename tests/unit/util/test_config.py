"""Unit tests for application settings."""

import pytest

from knowspace.config import DEFAULT_JWT_SECRET, AuthSettings, Settings
from knowspace.util.error import ConfigurationError


class TestSettings:
    """Tests for Settings validation and derived values."""

    def test_development_defaults(self):
        settings = Settings(environment="development", host="localhost", port=3001)

        assert settings.api.base_url == "http://localhost:3001"
        assert settings.api.frontend_url == "http://localhost:3000"
        assert "http://localhost:3000" in settings.api.cors_origins

    def test_production_uses_https_hosts(self):
        settings = Settings(
            environment="production",
            host="api.example.org",
            frontend_host="example.org",
            auth=AuthSettings(jwt_secret="real-secret"),
        )

        assert settings.api.base_url == "https://api.example.org"
        assert settings.api.cors_origins == ["https://example.org"]

    def test_production_refuses_default_secret(self):
        with pytest.raises(ConfigurationError, match="AUTH__JWT_SECRET"):
            Settings(
                environment="production",
                auth=AuthSettings(jwt_secret=DEFAULT_JWT_SECRET),
            )

    def test_database_url_shortcut(self):
        settings = Settings()

        assert settings.database_url == settings.database.url

    def test_extra_cors_origins_appended_once(self):
        settings = Settings(
            environment="development",
            extra_cors_origins=["https://preview.example.org", "http://localhost:3000"],
        )

        assert settings.api.cors_origins == [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8081",
            "https://preview.example.org",
        ]
