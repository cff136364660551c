"""Configuration provider (non-mockable)."""

from dishka import Scope, provide

from knowspace.config import AuthSettings, Settings
from knowspace.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Serves one ``Settings`` instance for the lifetime of the container.

    The instance is the one handed in, or is loaded from environment
    variables and ``.env`` on first use.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self.settings or Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token signing settings for the JWT service."""
        return settings.auth
