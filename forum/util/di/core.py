"""Core DI providers: settings and domain services."""

from dishka import Scope, provide

from forum.config import AuthSettings, DatabaseSettings, Settings
from forum.domain.service import AuthenticationService
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the services built from them. Never mocked.

    Settings are read once per container from the environment and ``.env``.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def provide_authentication(
        self, auth_settings: AuthSettings
    ) -> AuthenticationService:
        """Provide the token verifier shared by all requests."""
        return AuthenticationService(auth_settings)
