"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, PaymentSettings, Settings
from inkwell.util.di.base import ProviderBase


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
        """Provide auth settings.

        Raises:
            ConfigurationError: If session secrets are placeholders in a
                deployed environment
        """
        settings.ensure_deployable()
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_payment_settings(self, settings: Settings) -> PaymentSettings:
        """Provide payment gateway settings."""
        return settings.payment
