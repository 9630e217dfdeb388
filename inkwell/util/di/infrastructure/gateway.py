"""Payment gateway infrastructure providers."""

from dishka import Scope, provide

from inkwell.adapter.sslcommerz import RealSSLCommerzGateway, SSLCommerzGateway
from inkwell.config import PaymentSettings
from inkwell.domain.service import PaymentGateway
from inkwell.util.di.base import ProviderBase
from inkwell.util.error import ConfigurationError


class GatewayProvider(ProviderBase):
    """Payment gateway component base."""

    __mock_component__ = "gateway"


class ProdGatewayProvider(GatewayProvider):
    """Production SSLCommerz provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_sslcommerz_gateway(
        self, payment_settings: PaymentSettings
    ) -> SSLCommerzGateway:
        """Provide SSLCommerz client.

        Returns:
            SSLCommerz client for the configured environment

        Raises:
            ConfigurationError: If live mode runs with placeholder credentials
        """
        if not payment_settings.store_id or not payment_settings.store_password:
            raise ConfigurationError("SSLCommerz store credentials must be configured")
        if (
            not payment_settings.sandbox
            and payment_settings.store_id == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError("Live SSLCommerz mode needs a real store ID")

        return RealSSLCommerzGateway(
            store_id=payment_settings.store_id,
            store_password=payment_settings.store_password,
            base_url=payment_settings.gateway_base_url,
            timeout=payment_settings.request_timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_payment_gateway(self, gateway: SSLCommerzGateway) -> PaymentGateway:
        """Expose the SSLCommerz client as the domain's gateway."""
        return gateway
