"""Integration tests for the PostgreSQL repositories.

These tests need a migrated database at DATABASE__URL and are skipped
otherwise.
"""

import os
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inkwell.domain.model import PaymentTransaction
from inkwell.domain.repository import CommentRepository, TransactionRepository
from inkwell.domain.value import Customer, Email, TransactionId, TransactionStatus
from inkwell.persistence.repository import PostgresTransactionRepository
from tests.conftest import make_comment, make_reply
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_append_keeps_order_and_bumps_version(self, integration_env):
        """JSONB appends land at the end and bump the version each time."""
        # Arrange
        repo = await integration_env.get(CommentRepository)
        comment = await repo.insert(make_comment())
        r1, r2 = make_reply("one"), make_reply("two")

        # Act
        assert await repo.append_reply(comment.id, r1)
        assert await repo.append_reply(comment.id, r2)

        # Assert
        stored = await repo.find_by_id(comment.id)
        assert stored is not None
        assert [r.id for r in stored.replies] == [r1.id, r2.id]
        assert stored.version == 2

    @pytest.mark.asyncio
    async def test_replace_with_stale_version_writes_nothing(self, integration_env):
        """A rewrite based on an old version is rejected."""
        # Arrange
        repo = await integration_env.get(CommentRepository)
        r1 = make_reply("one")
        comment = await repo.insert(make_comment(replies=(r1,)))
        await repo.append_reply(comment.id, make_reply("concurrent"))

        # Act
        written = await repo.replace_replies(comment.id, (), expected_version=0)

        # Assert
        assert written is False
        stored = await repo.find_by_id(comment.id)
        assert stored is not None
        assert len(stored.replies) == 2

    @pytest.mark.asyncio
    async def test_append_to_missing_comment(self, integration_env):
        """Appending to an unknown comment reports False."""
        # Arrange
        repo = await integration_env.get(CommentRepository)

        # Act & Assert
        assert await repo.append_reply(make_comment().id, make_reply()) is False


class TestPostgresTransactionRepository:
    """Integration tests for PostgresTransactionRepository."""

    @pytest.mark.asyncio
    async def test_mark_paid_only_once(self, integration_env):
        """The conditional update moves PENDING to PAID exactly once."""
        # Arrange
        repo = await integration_env.get(TransactionRepository)
        transaction = await repo.insert(
            PaymentTransaction(
                id=TransactionId(uuid4()),
                customer=Customer(name="Carol", email=Email("carol@example.com")),
                amount=Decimal("250.00"),
                currency="BDT",
            )
        )
        now = datetime.now(timezone.utc)

        # Act
        first = await repo.mark_paid(transaction.id, now, "val-1")
        second = await repo.mark_paid(transaction.id, now, "val-2")

        # Assert
        assert first is True
        assert second is False
        stored = await repo.find_by_id(transaction.id)
        assert stored is not None
        assert stored.status == TransactionStatus.PAID
        assert stored.validation_id == "val-1"
        assert stored.amount == Decimal("250.00")

    @pytest.mark.asyncio
    async def test_insert_is_visible_to_other_sessions(self, integration_env):
        """A pending record can be read by a callback before the request ends."""
        # Arrange
        repo = await integration_env.get(TransactionRepository)
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        transaction = await repo.insert(
            PaymentTransaction(
                id=TransactionId(uuid4()),
                customer=Customer(name="Carol", email=Email("carol@example.com")),
                amount=Decimal("99.00"),
                currency="BDT",
            )
        )

        # Act
        async with session_factory() as other_session:
            stored = await PostgresTransactionRepository(other_session).find_by_id(
                transaction.id
            )

        # Assert
        assert stored is not None
        assert stored.status == TransactionStatus.PENDING
