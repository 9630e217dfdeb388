"""Payment transaction repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from inkwell.domain.model.transaction import PaymentTransaction
from inkwell.domain.value import Email, TransactionId


class TransactionRepository(ABC):
    """Repository for PaymentTransaction records.

    Records are keyed by the locally generated transaction id, not by any
    store-assigned identity.
    """

    @abstractmethod
    async def find_by_id(
        self, transaction_id: TransactionId
    ) -> Optional[PaymentTransaction]:
        """Find a transaction by its correlation id.

        Args:
            transaction_id: Transaction ID

        Returns:
            The transaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_customer_email(self, email: Email) -> List[PaymentTransaction]:
        """Find all transactions of a customer, newest first.

        Args:
            email: Customer e-mail

        Returns:
            List of transactions
        """
        pass

    @abstractmethod
    async def insert(self, transaction: PaymentTransaction) -> PaymentTransaction:
        """Insert a new transaction record.

        Args:
            transaction: Transaction to insert

        Returns:
            The stored transaction
        """
        pass

    @abstractmethod
    async def mark_paid(
        self,
        transaction_id: TransactionId,
        paid_at: datetime,
        validation_id: Optional[str],
    ) -> bool:
        """Move a PENDING transaction to PAID.

        The transition is conditional on the stored status being PENDING,
        so concurrent duplicate callbacks apply it at most once.

        Args:
            transaction_id: Transaction ID
            paid_at: Payment confirmation time
            validation_id: Gateway validation reference, if any

        Returns:
            True if this call performed the transition, False otherwise
        """
        pass
