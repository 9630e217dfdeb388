"""Unit tests for row mappers and store error translation."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from inkwell.domain.error import StoreError
from inkwell.domain.value import TransactionStatus
from inkwell.persistence.database import store_errors
from inkwell.persistence.mappers import (
    comment_to_dict,
    replies_to_json,
    row_to_comment,
    row_to_transaction,
)
from tests.conftest import make_comment, make_reply


class TestCommentMapping:
    """Tests for comment document mapping."""

    def test_replies_are_json_documents(self):
        """Embedded replies carry string ids and ISO timestamps."""
        # Arrange
        reply = make_reply("hello")

        # Act
        documents = replies_to_json([reply])

        # Assert
        assert documents[0]["id"] == str(reply.id)
        assert documents[0]["author"]["email"] == "alice@example.com"
        assert isinstance(documents[0]["created_at"], str)

    def test_row_preserves_reply_order(self):
        """Replies come back in the order they are stored."""
        # Arrange
        replies = tuple(make_reply(f"reply {i}") for i in range(3))
        row = comment_to_dict(make_comment(replies=replies))
        row["id"] = str(row["id"])

        # Act
        comment = row_to_comment(row)

        # Assert
        assert [r.id for r in comment.replies] == [r.id for r in replies]
        assert [r.text for r in comment.replies] == ["reply 0", "reply 1", "reply 2"]

    def test_row_with_null_replies(self):
        """A NULL replies column maps to an empty sequence."""
        # Arrange
        row = comment_to_dict(make_comment())
        row["replies"] = None

        # Act
        comment = row_to_comment(row)

        # Assert
        assert comment.replies == ()


class TestTransactionMapping:
    """Tests for transaction mapping."""

    def test_row_to_transaction(self):
        """Status strings and customer documents map to domain types."""
        # Arrange
        transaction_id = uuid4()
        row = {
            "id": transaction_id,
            "customer": {"name": "Carol", "email": "carol@example.com", "phone": None},
            "amount": Decimal("250.00"),
            "currency": "BDT",
            "status": "paid",
            "gateway_session": "abc",
            "validation_id": "val-1",
            "created_at": datetime.now(timezone.utc),
            "paid_at": datetime.now(timezone.utc),
        }

        # Act
        transaction = row_to_transaction(row)

        # Assert
        assert transaction.id == transaction_id
        assert transaction.status == TransactionStatus.PAID
        assert transaction.customer.email.root == "carol@example.com"


class TestStoreErrors:
    """Tests for store_errors."""

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_store_error(self):
        """SQLAlchemy errors roll back the session and surface as StoreError."""
        # Arrange
        session = MagicMock()
        session.rollback = AsyncMock()

        # Act & Assert
        with pytest.raises(StoreError, match="comments.insert"):
            async with store_errors(session, "comments.insert"):
                raise OperationalError("INSERT", {}, Exception("connection lost"))

        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_other_errors_pass_through(self):
        """Non-database errors are not rewritten."""
        # Arrange
        session = MagicMock()
        session.rollback = AsyncMock()

        # Act & Assert
        with pytest.raises(KeyError):
            async with store_errors(session, "comments.insert"):
                raise KeyError("boom")

        session.rollback.assert_not_awaited()
