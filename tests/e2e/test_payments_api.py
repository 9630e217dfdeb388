"""End-to-end tests for checkout and gateway callbacks."""

from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from inkwell.adapter.sslcommerz import MockSSLCommerzGateway
from inkwell.interface.api.app import create_app
from tests.di import build_test_container

CHECKOUT = {
    "customer": {"name": "Carol", "email": "carol@example.com", "phone": "01700000000"},
    "amount": "250.00",
}


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def signed_in(client):
    """Client holding a session cookie for carol."""
    client.post("/auth/session", json={"email": "carol@example.com"})
    return client


def start_checkout(client) -> str:
    response = client.post("/payment", json=CHECKOUT)
    assert response.status_code == 200
    return response.json()["transaction_id"]


class TestCheckout:
    """End-to-end tests for POST /payment."""

    def test_checkout_requires_auth(self, client):
        """Should return 401 when not authenticated."""
        response = client.post("/payment", json=CHECKOUT)

        assert response.status_code == 401

    def test_checkout_returns_gateway_redirect(self, signed_in):
        """The response carries the hosted checkout URL."""
        # Act
        response = signed_in.post("/payment", json=CHECKOUT)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["redirect_url"].startswith("https://sandbox.sslcommerz.com/")
        pending = signed_in.get(f"/payment/{data['transaction_id']}")
        assert pending.json()["status"] == "pending"
        assert Decimal(pending.json()["amount"]) == Decimal("250.00")

    def test_checkout_rejects_non_positive_amount(self, signed_in):
        """Request validation rejects zero amounts."""
        response = signed_in.post("/payment", json={**CHECKOUT, "amount": "0"})

        assert response.status_code == 422

    def test_checkout_for_someone_else_is_forbidden(self, client):
        """A session cannot open checkouts under another customer's e-mail."""
        # Arrange
        client.post("/auth/session", json={"email": "mallory@example.com"})

        # Act
        response = client.post("/payment", json=CHECKOUT)

        # Assert
        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"
        client.post("/auth/session", json={"email": "carol@example.com"})
        assert client.get("/payments").json()["total"] == 0


class TestGatewayCallbacks:
    """End-to-end tests for /success, /fail and /cancel."""

    def test_success_marks_paid_and_redirects(self, signed_in):
        """A verified success callback marks paid and redirects to the frontend."""
        # Arrange
        transaction_id = start_checkout(signed_in)
        val_id = MockSSLCommerzGateway.validation_id_for(transaction_id)

        # Act
        response = signed_in.post(
            f"/success/{transaction_id}",
            data={"val_id": val_id},
            follow_redirects=False,
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"].endswith(
            f"/payment/success?transaction_id={transaction_id}"
        )
        paid = signed_in.get(f"/payment/{transaction_id}").json()
        assert paid["status"] == "paid"
        assert paid["paid_at"] is not None

    def test_duplicate_success_callback(self, signed_in):
        """Replaying the callback is harmless."""
        # Arrange
        transaction_id = start_checkout(signed_in)
        val_id = MockSSLCommerzGateway.validation_id_for(transaction_id)
        signed_in.post(
            f"/success/{transaction_id}",
            data={"val_id": val_id},
            follow_redirects=False,
        )
        paid_at = signed_in.get(f"/payment/{transaction_id}").json()["paid_at"]

        # Act
        response = signed_in.post(
            f"/success/{transaction_id}",
            data={"val_id": val_id},
            follow_redirects=False,
        )

        # Assert
        assert response.status_code == 303
        again = signed_in.get(f"/payment/{transaction_id}").json()
        assert again["status"] == "paid"
        assert again["paid_at"] == paid_at

    def test_success_for_unknown_transaction(self, client):
        """Should return 404 TransactionNotFound."""
        # Act
        response = client.post(
            f"/success/{uuid4()}", data={"val_id": "x"}, follow_redirects=False
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["error"] == "TransactionNotFound"

    def test_success_without_val_id_is_refused(self, signed_in):
        """Unverifiable callbacks leave the transaction pending."""
        # Arrange
        transaction_id = start_checkout(signed_in)

        # Act
        response = signed_in.post(f"/success/{transaction_id}", follow_redirects=False)

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "CallbackVerificationFailed"
        pending = signed_in.get(f"/payment/{transaction_id}").json()
        assert pending["status"] == "pending"

    @pytest.mark.parametrize("outcome", ["fail", "cancel"])
    def test_fail_and_cancel_leave_pending(self, signed_in, outcome):
        """Failure and cancel callbacks redirect without changing state."""
        # Arrange
        transaction_id = start_checkout(signed_in)

        # Act
        response = signed_in.post(
            f"/{outcome}/{transaction_id}", follow_redirects=False
        )

        # Assert
        assert response.status_code == 303
        assert f"/payment/{outcome}?" in response.headers["location"]
        pending = signed_in.get(f"/payment/{transaction_id}").json()
        assert pending["status"] == "pending"


class TestTransactionListing:
    """End-to-end tests for GET /payments."""

    def test_lists_own_transactions(self, signed_in):
        """The signed-in customer sees their transactions."""
        # Arrange
        transaction_id = start_checkout(signed_in)

        # Act
        response = signed_in.get("/payments")

        # Assert
        assert response.status_code == 200
        assert [t["transaction_id"] for t in response.json()["transactions"]] == [
            transaction_id
        ]

    def test_listing_requires_auth(self, client):
        """Should return 401 when not authenticated."""
        assert client.get("/payments").status_code == 401
