"""List transactions use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.payment.view import TransactionItem, transaction_item
from inkwell.domain.service import PaymentService
from inkwell.domain.value import Email


class ListTransactionsRequest(BaseModel):
    """List transactions request."""

    email: Email  # Session subject


class ListTransactionsResponse(BaseModel):
    """List transactions response."""

    transactions: list[TransactionItem]
    total: int


class ListTransactionsUseCase(BaseUseCase):
    """Use case for listing the signed-in customer's transactions."""

    def __init__(self, payment_service: PaymentService) -> None:
        self.payment_service = payment_service

    async def execute(
        self, request: ListTransactionsRequest
    ) -> ListTransactionsResponse:
        transactions = await self.payment_service.list_transactions_for_customer(
            request.email
        )
        items = [transaction_item(transaction) for transaction in transactions]
        return ListTransactionsResponse(transactions=items, total=len(items))
