"""Get transaction use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.payment.view import TransactionItem, transaction_item
from inkwell.domain.service import PaymentService
from inkwell.domain.value import TransactionId, parse_identifier


class GetTransactionRequest(BaseModel):
    """Get transaction request."""

    transaction_id: str  # UUID string


class GetTransactionUseCase(BaseUseCase):
    """Use case for reading a transaction's status."""

    def __init__(self, payment_service: PaymentService) -> None:
        self.payment_service = payment_service

    async def execute(self, request: GetTransactionRequest) -> TransactionItem:
        transaction_id = TransactionId(
            parse_identifier(request.transaction_id, "transaction")
        )
        transaction = await self.payment_service.get_transaction(transaction_id)
        return transaction_item(transaction)
