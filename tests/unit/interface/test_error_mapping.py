"""Unit tests for HTTP error rendering."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from inkwell.adapter.sslcommerz import SSLCommerzError
from inkwell.domain.error import (
    CallbackVerificationError,
    ConcurrentModificationError,
    DomainError,
    ForbiddenError,
    InvalidIdentifierError,
    NotFoundError,
    ReplyNotFoundError,
    StoreError,
    TransactionNotFoundError,
    UnauthorizedError,
)
from inkwell.interface.error import register_error_handlers, status_for


@pytest.mark.parametrize(
    "error,status_code",
    [
        (UnauthorizedError("no"), 401),
        (ForbiddenError("not yours"), 403),
        (InvalidIdentifierError("comment", "x"), 400),
        (NotFoundError("Comment", "1"), 404),
        (ReplyNotFoundError("1", "2"), 404),
        (TransactionNotFoundError("1"), 404),
        (ConcurrentModificationError("Comment", "1"), 409),
        (CallbackVerificationError("bad"), 400),
        (SSLCommerzError("down"), 502),
        (StoreError("down"), 500),
        (DomainError("unknown"), 500),
    ],
)
def test_status_for(error, status_code):
    """Each error kind maps to a fixed status, subclasses included."""
    assert status_for(error) == status_code


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/reply")
    async def missing_reply():
        raise ReplyNotFoundError("c1", "r1")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    """Tests for the registered exception handlers."""

    def test_domain_error_body(self, client):
        """Domain errors carry their kind and message."""
        # Act
        response = client.get("/reply")

        # Assert
        assert response.status_code == 404
        assert response.json() == {
            "error": "ReplyNotFound",
            "detail": "Reply r1 not found in comment c1",
        }

    def test_unexpected_error_is_opaque(self, client):
        """Unexpected failures do not leak internals."""
        # Act
        response = client.get("/boom")

        # Assert
        assert response.status_code == 500
        assert response.json()["error"] == "InternalError"
        assert "secret" not in response.json()["detail"]
