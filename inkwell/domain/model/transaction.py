"""Payment transaction entity.

A transaction is created PENDING when checkout starts and becomes PAID only
through the gateway's success callback.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utc_now
from inkwell.domain.value import Customer, TransactionId, TransactionStatus


class PaymentTransaction(DomainModel):
    """Payment transaction entity.

    Business rules:
    - id is generated locally before the gateway is contacted and is the
      correlation key of the later callback
    - amount and currency are fixed at creation
    - status only moves PENDING -> PAID, never back
    """

    id: TransactionId
    customer: Customer
    amount: Decimal = Field(gt=0)
    currency: str = Field(min_length=3, max_length=3)
    status: TransactionStatus = TransactionStatus.PENDING
    gateway_session: Optional[str] = None  # Session key returned by the gateway
    validation_id: Optional[str] = None  # Gateway validation reference once paid
    created_at: datetime = Field(default_factory=utc_now)
    paid_at: Optional[datetime] = None

    @property
    def is_paid(self) -> bool:
        """Whether the transaction reached its terminal state."""
        return self.status == TransactionStatus.PAID
