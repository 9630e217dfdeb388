"""Unit tests for PostgresTransactionRepository session handling."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from inkwell.domain.model import PaymentTransaction
from inkwell.domain.value import Customer, Email, TransactionId
from inkwell.persistence.repository import PostgresTransactionRepository


def make_transaction() -> PaymentTransaction:
    return PaymentTransaction(
        id=TransactionId(uuid4()),
        customer=Customer(name="Carol", email=Email("carol@example.com")),
        amount=Decimal("250.00"),
        currency="BDT",
    )


class TestInsert:
    """Tests for PostgresTransactionRepository.insert."""

    @pytest.mark.asyncio
    async def test_insert_commits_before_returning(self):
        """The pending record is committed by insert itself."""
        # Arrange
        session = MagicMock()
        session.execute = AsyncMock()
        session.commit = AsyncMock()
        session.rollback = AsyncMock()
        repo = PostgresTransactionRepository(session)
        transaction = make_transaction()

        # Act
        stored = await repo.insert(transaction)

        # Assert
        assert stored == transaction
        session.execute.assert_awaited_once()
        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
