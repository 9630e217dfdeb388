"""Response shapes shared by payment use cases."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from inkwell.domain.model.transaction import PaymentTransaction
from inkwell.domain.value import TransactionStatus


class TransactionItem(BaseModel):
    """Transaction in response."""

    transaction_id: str
    customer_name: str
    customer_email: str
    amount: Decimal
    currency: str
    status: TransactionStatus
    created_at: datetime
    paid_at: datetime | None


def transaction_item(transaction: PaymentTransaction) -> TransactionItem:
    return TransactionItem(
        transaction_id=str(transaction.id),
        customer_name=transaction.customer.name,
        customer_email=transaction.customer.email.root,
        amount=transaction.amount,
        currency=transaction.currency,
        status=transaction.status,
        created_at=transaction.created_at,
        paid_at=transaction.paid_at,
    )
