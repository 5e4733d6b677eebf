"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from devfeed.config import (
    AuthSettings,
    DuplicateFilterSettings,
    GenerationSettings,
    Settings,
    ThreadSettings,
)
from devfeed.util.di.base import ProviderBase


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
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        return settings.threads

    @provide(scope=Scope.APP)
    def provide_duplicate_settings(self, settings: Settings) -> DuplicateFilterSettings:
        return settings.duplicates

    @provide(scope=Scope.APP)
    def provide_generation_settings(self, settings: Settings) -> GenerationSettings:
        return settings.generation
