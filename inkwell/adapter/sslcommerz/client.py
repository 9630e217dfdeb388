"""SSLCommerz hosted checkout client.

Implements session initiation (``/gwprocess/v4/api.php``) and the order
validation API used to verify success callbacks.
"""

from decimal import Decimal, InvalidOperation

import httpx
import logfire

from inkwell.domain.error import GatewayError
from inkwell.domain.service.payment_service import (
    GatewayCheckoutRequest,
    GatewayCheckoutSession,
    GatewayValidation,
    PaymentGateway,
)


class SSLCommerzError(GatewayError):
    """SSLCommerz request failed or was refused."""

    pass


class SSLCommerzGateway(PaymentGateway):
    """Base class for SSLCommerz gateway clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSSLCommerzGateway(SSLCommerzGateway):
    """SSLCommerz client talking to the sandbox or live environment."""

    def __init__(
        self,
        store_id: str,
        store_password: str,
        base_url: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize SSLCommerz client.

        Args:
            store_id: Merchant store ID
            store_password: Merchant store password
            base_url: Gateway root (sandbox or live)
            timeout: Request timeout in seconds
        """
        self.store_id = store_id
        self.store_password = store_password
        self.timeout = timeout

        base_url = base_url.rstrip("/")
        self.session_url = f"{base_url}/gwprocess/v4/api.php"
        self.validation_url = f"{base_url}/validator/api/validationserverAPI.php"

    async def initiate_checkout(
        self, request: GatewayCheckoutRequest
    ) -> GatewayCheckoutSession:
        """Open a hosted checkout session.

        Args:
            request: Checkout details

        Returns:
            Session carrying the GatewayPageURL

        Raises:
            SSLCommerzError: If the request fails or the gateway refuses it
        """
        customer = request.customer
        data = {
            "store_id": self.store_id,
            "store_passwd": self.store_password,
            "total_amount": f"{request.amount:.2f}",
            "currency": request.currency,
            "tran_id": str(request.transaction_id),
            "success_url": request.success_url,
            "fail_url": request.fail_url,
            "cancel_url": request.cancel_url,
            "cus_name": customer.name,
            "cus_email": customer.email.root,
            "cus_phone": customer.phone or "N/A",
            "cus_add1": "N/A",
            "cus_city": "N/A",
            "cus_country": "Bangladesh",
            "shipping_method": "NO",
            "product_name": "Order",
            "product_category": "General",
            "product_profile": "general",
        }

        result = await self._request("POST", self.session_url, data=data)

        if result.get("status") != "SUCCESS" or not result.get("GatewayPageURL"):
            reason = result.get("failedreason") or "no gateway URL returned"
            logfire.error(
                "SSLCommerz refused checkout session",
                transaction_id=str(request.transaction_id),
                reason=reason,
            )
            raise SSLCommerzError(f"Checkout session refused: {reason}")

        logfire.info(
            "SSLCommerz checkout session created",
            transaction_id=str(request.transaction_id),
        )
        return GatewayCheckoutSession(
            redirect_url=result["GatewayPageURL"],
            session_key=result.get("sessionkey"),
        )

    async def validate_payment(self, validation_id: str) -> GatewayValidation:
        """Look up a payment through the validation API.

        Args:
            validation_id: ``val_id`` posted to the success callback

        Returns:
            The gateway's record of the payment

        Raises:
            SSLCommerzError: If the request fails or the answer is unreadable
        """
        params = {
            "val_id": validation_id,
            "store_id": self.store_id,
            "store_passwd": self.store_password,
            "format": "json",
        }

        result = await self._request("GET", self.validation_url, params=params)

        # currency_type/currency_amount hold the original order values when
        # the gateway converted the charge
        currency = result.get("currency_type") or result.get("currency") or ""
        raw_amount = result.get("currency_amount") or result.get("amount") or "0"
        try:
            amount = Decimal(str(raw_amount))
        except InvalidOperation:
            raise SSLCommerzError(f"Unreadable amount in validation: {raw_amount!r}")

        return GatewayValidation(
            status=str(result.get("status", "")),
            transaction_id=str(result.get("tran_id", "")),
            amount=amount,
            currency=currency,
        )

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        """Send a request and return the decoded JSON body.

        Raises:
            SSLCommerzError: On transport errors, non-200 responses or bad JSON
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method, url, timeout=self.timeout, **kwargs
                )

                if response.status_code != 200:
                    logfire.error(
                        "SSLCommerz request failed",
                        url=url,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise SSLCommerzError(
                        f"Gateway request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("SSLCommerz HTTP error", url=url, error=str(e))
            raise SSLCommerzError(f"HTTP error talking to gateway: {e}")
        except ValueError as e:
            logfire.error("SSLCommerz returned invalid JSON", url=url, error=str(e))
            raise SSLCommerzError("Gateway returned invalid JSON")


class MockSSLCommerzGateway(SSLCommerzGateway):
    """Mock SSLCommerz client for testing.

    Returns deterministic data without making real API calls. Validation ids
    are ``mock-val-<transaction id>`` and validate against the checkout that
    was opened for that transaction.
    """

    def __init__(self) -> None:
        """Initialize mock client without real gateway configuration."""
        self.checkouts: dict[str, GatewayCheckoutRequest] = {}
        self.validation_calls: list[str] = []
        self.fail_checkout = False

    @staticmethod
    def validation_id_for(transaction_id: str) -> str:
        """Validation id the mock accepts for a transaction."""
        return f"mock-val-{transaction_id}"

    async def initiate_checkout(
        self, request: GatewayCheckoutRequest
    ) -> GatewayCheckoutSession:
        """Return a mock checkout session, or fail if told to."""
        if self.fail_checkout:
            raise SSLCommerzError("Checkout session refused: mock failure")

        transaction_id = str(request.transaction_id)
        self.checkouts[transaction_id] = request
        return GatewayCheckoutSession(
            redirect_url=f"https://sandbox.sslcommerz.com/EasyCheckOut/mock-{transaction_id}",
            session_key=f"mock-session-{transaction_id}",
        )

    async def validate_payment(self, validation_id: str) -> GatewayValidation:
        """Validate against the recorded checkouts."""
        self.validation_calls.append(validation_id)

        transaction_id = validation_id.removeprefix("mock-val-")
        checkout = self.checkouts.get(transaction_id)
        if checkout is None:
            return GatewayValidation(
                status="INVALID_TRANSACTION",
                transaction_id=transaction_id,
                amount=Decimal("0"),
                currency="",
            )

        return GatewayValidation(
            status="VALID",
            transaction_id=transaction_id,
            amount=checkout.amount,
            currency=checkout.currency,
        )
