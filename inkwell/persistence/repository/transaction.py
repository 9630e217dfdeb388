"""PostgreSQL implementation of PaymentTransaction repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import PaymentTransaction
from inkwell.domain.repository import TransactionRepository
from inkwell.domain.value import Email, TransactionId, TransactionStatus
from inkwell.persistence.database import store_errors
from inkwell.persistence.mappers import row_to_transaction, transaction_to_dict
from inkwell.persistence.tables import payment_transactions_table


class PostgresTransactionRepository(TransactionRepository):
    """PostgreSQL implementation of TransactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, transaction_id: TransactionId
    ) -> Optional[PaymentTransaction]:
        """Find a transaction by ID."""
        async with store_errors(self.session, "payment_transactions.find_by_id"):
            stmt = select(payment_transactions_table).where(
                payment_transactions_table.c.id == transaction_id
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_transaction(row._asdict()) if row else None

    async def find_by_customer_email(self, email: Email) -> List[PaymentTransaction]:
        """Find a customer's transactions, newest first."""
        async with store_errors(
            self.session, "payment_transactions.find_by_customer_email"
        ):
            stmt = (
                select(payment_transactions_table)
                .where(payment_transactions_table.c.customer_email == email.root)
                .order_by(desc(payment_transactions_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_transaction(row._asdict()) for row in result.fetchall()]

    async def insert(self, transaction: PaymentTransaction) -> PaymentTransaction:
        """Insert a new transaction and commit it.

        Committed here rather than at the end of the request: the gateway
        may call back as soon as the redirect URL reaches the customer.
        """
        async with store_errors(self.session, "payment_transactions.insert"):
            stmt = payment_transactions_table.insert().values(
                **transaction_to_dict(transaction)
            )
            await self.session.execute(stmt)
            await self.session.commit()
            return transaction

    async def mark_paid(
        self,
        transaction_id: TransactionId,
        paid_at: datetime,
        validation_id: Optional[str],
    ) -> bool:
        """Conditionally move PENDING to PAID in a single UPDATE."""
        async with store_errors(self.session, "payment_transactions.mark_paid"):
            stmt = (
                update(payment_transactions_table)
                .where(payment_transactions_table.c.id == transaction_id)
                .where(
                    payment_transactions_table.c.status
                    == TransactionStatus.PENDING.value
                )
                .values(
                    status=TransactionStatus.PAID.value,
                    paid_at=paid_at,
                    validation_id=validation_id,
                )
                .returning(payment_transactions_table.c.id)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row is not None
