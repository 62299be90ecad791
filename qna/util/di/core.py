"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from qna.application.usecase.pagination import Pagination
from qna.config import AuthSettings, ReputationSettings, Settings
from qna.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        """Provide reputation point settings."""
        return settings.reputation

    @provide(scope=Scope.APP)
    def provide_pagination(self, settings: Settings) -> Pagination:
        """Provide query-string pagination parser."""
        return Pagination(settings.pagination)
