"""In-memory payment transaction repository for testing."""

from datetime import datetime
from typing import Optional

from inkwell.domain.model.transaction import PaymentTransaction
from inkwell.domain.repository.transaction import TransactionRepository
from inkwell.domain.value import Email, TransactionId, TransactionStatus


class InMemoryTransactionRepository(TransactionRepository):
    """In-memory implementation of TransactionRepository for testing."""

    def __init__(self) -> None:
        self._transactions: dict[TransactionId, PaymentTransaction] = {}

    async def find_by_id(
        self, transaction_id: TransactionId
    ) -> Optional[PaymentTransaction]:
        """Find a transaction by ID."""
        return self._transactions.get(transaction_id)

    async def find_by_customer_email(self, email: Email) -> list[PaymentTransaction]:
        """Find a customer's transactions, newest first."""
        transactions = [
            t for t in self._transactions.values() if t.customer.email == email
        ]
        transactions.sort(key=lambda t: t.created_at, reverse=True)
        return transactions

    async def insert(self, transaction: PaymentTransaction) -> PaymentTransaction:
        """Insert a transaction."""
        self._transactions[transaction.id] = transaction
        return transaction

    async def mark_paid(
        self,
        transaction_id: TransactionId,
        paid_at: datetime,
        validation_id: Optional[str],
    ) -> bool:
        """Move a pending transaction to paid."""
        transaction = self._transactions.get(transaction_id)
        if transaction is None or transaction.status != TransactionStatus.PENDING:
            return False

        self._transactions[transaction_id] = transaction.model_copy(
            update={
                "status": TransactionStatus.PAID,
                "paid_at": paid_at,
                "validation_id": validation_id,
            }
        )
        return True
