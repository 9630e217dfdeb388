"""Mock payment gateway providers for testing."""

from dishka import Scope, provide

from inkwell.adapter.sslcommerz import MockSSLCommerzGateway, SSLCommerzGateway
from inkwell.domain.service import PaymentGateway
from inkwell.util.di.infrastructure.gateway import GatewayProvider


class MockGatewayProvider(GatewayProvider):
    """Mock gateway provider using the deterministic SSLCommerz stand-in."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_sslcommerz_gateway(self) -> SSLCommerzGateway:
        """Provide mock SSLCommerz client."""
        return MockSSLCommerzGateway()

    @provide(scope=Scope.APP)
    def get_payment_gateway(self, gateway: SSLCommerzGateway) -> PaymentGateway:
        """Expose the mock client as the domain's gateway."""
        return gateway
