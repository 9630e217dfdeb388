"""Unit tests for the SSLCommerz client."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import httpx
import pytest

from inkwell.adapter.sslcommerz import RealSSLCommerzGateway, SSLCommerzError
from inkwell.domain.error import GatewayError
from inkwell.domain.service import GatewayCheckoutRequest
from inkwell.domain.value import Customer, Email, TransactionId


def make_gateway() -> RealSSLCommerzGateway:
    return RealSSLCommerzGateway(
        store_id="teststore",
        store_password="teststore@ssl",
        base_url="https://sandbox.sslcommerz.com/",
        timeout=5.0,
    )


def make_checkout_request() -> GatewayCheckoutRequest:
    transaction_id = TransactionId(uuid4())
    return GatewayCheckoutRequest(
        transaction_id=transaction_id,
        amount=Decimal("250"),
        currency="BDT",
        customer=Customer(name="Carol", email=Email("carol@example.com")),
        success_url=f"http://localhost:8000/success/{transaction_id}",
        fail_url=f"http://localhost:8000/fail/{transaction_id}",
        cancel_url=f"http://localhost:8000/cancel/{transaction_id}",
    )


def mock_http(response_json=None, status_code: int = 200, side_effect=None):
    """Patch httpx.AsyncClient so requests return a canned response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = "error body"
    response.json.return_value = response_json

    client = MagicMock()
    client.request = AsyncMock(return_value=response, side_effect=side_effect)

    async_client = MagicMock()
    async_client.return_value.__aenter__ = AsyncMock(return_value=client)
    async_client.return_value.__aexit__ = AsyncMock(return_value=False)
    return patch("httpx.AsyncClient", async_client), client


class TestInitiateCheckout:
    """Tests for session initiation."""

    @pytest.mark.asyncio
    async def test_success_returns_gateway_page(self):
        """A SUCCESS answer yields the GatewayPageURL and session key."""
        # Arrange
        gateway = make_gateway()
        request = make_checkout_request()
        patcher, client = mock_http(
            {
                "status": "SUCCESS",
                "GatewayPageURL": "https://sandbox.sslcommerz.com/EasyCheckOut/abc",
                "sessionkey": "abc",
            }
        )

        # Act
        with patcher:
            session = await gateway.initiate_checkout(request)

        # Assert
        assert session.redirect_url.endswith("/EasyCheckOut/abc")
        assert session.session_key == "abc"
        method, url = client.request.call_args.args
        data = client.request.call_args.kwargs["data"]
        assert method == "POST"
        assert url == "https://sandbox.sslcommerz.com/gwprocess/v4/api.php"
        assert data["tran_id"] == str(request.transaction_id)
        assert data["total_amount"] == "250.00"
        assert data["store_id"] == "teststore"
        assert data["success_url"] == request.success_url

    @pytest.mark.asyncio
    async def test_refusal_raises(self):
        """A FAILED answer raises with the gateway's reason."""
        # Arrange
        patcher, _ = mock_http({"status": "FAILED", "failedreason": "Store inactive"})

        # Act & Assert
        with patcher, pytest.raises(SSLCommerzError, match="Store inactive"):
            await make_gateway().initiate_checkout(make_checkout_request())

    @pytest.mark.asyncio
    async def test_http_status_error_raises(self):
        """Non-200 responses become gateway errors."""
        # Arrange
        patcher, _ = mock_http({}, status_code=503)

        # Act & Assert
        with patcher, pytest.raises(GatewayError):
            await make_gateway().initiate_checkout(make_checkout_request())

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Connection failures become gateway errors."""
        # Arrange
        patcher, _ = mock_http(side_effect=httpx.ConnectError("unreachable"))

        # Act & Assert
        with patcher, pytest.raises(SSLCommerzError, match="HTTP error"):
            await make_gateway().initiate_checkout(make_checkout_request())


class TestValidatePayment:
    """Tests for the validation API lookup."""

    @pytest.mark.asyncio
    async def test_validation_reads_order_values(self):
        """Original currency values are preferred over converted ones."""
        # Arrange
        patcher, client = mock_http(
            {
                "status": "VALID",
                "tran_id": "ABC",
                "amount": "2.50",
                "currency": "USD",
                "currency_type": "BDT",
                "currency_amount": "250.00",
            }
        )

        # Act
        with patcher:
            validation = await make_gateway().validate_payment("val-123")

        # Assert
        assert validation.status == "VALID"
        assert validation.transaction_id == "ABC"
        assert validation.amount == Decimal("250.00")
        assert validation.currency == "BDT"
        params = client.request.call_args.kwargs["params"]
        assert params["val_id"] == "val-123"
        assert params["format"] == "json"

    @pytest.mark.asyncio
    async def test_validation_falls_back_to_plain_amount(self):
        """Without conversion fields the plain amount and currency are used."""
        # Arrange
        patcher, _ = mock_http(
            {"status": "VALIDATED", "tran_id": "ABC", "amount": "10", "currency": "BDT"}
        )

        # Act
        with patcher:
            validation = await make_gateway().validate_payment("val-123")

        # Assert
        assert validation.amount == Decimal("10")
        assert validation.currency == "BDT"

    @pytest.mark.asyncio
    async def test_unreadable_amount_raises(self):
        """A garbage amount is a gateway error, not a crash."""
        # Arrange
        patcher, _ = mock_http({"status": "VALID", "amount": "ten"})

        # Act & Assert
        with patcher, pytest.raises(SSLCommerzError, match="amount"):
            await make_gateway().validate_payment("val-123")

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        """A body that is not JSON becomes a gateway error."""
        # Arrange
        patcher, client = mock_http()
        client.request.return_value.json.side_effect = ValueError("no json")

        # Act & Assert
        with patcher, pytest.raises(SSLCommerzError, match="invalid JSON"):
            await make_gateway().validate_payment("val-123")
