"""Confirm payment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import PaymentService
from inkwell.domain.value import TransactionId, TransactionStatus, parse_identifier


class ConfirmPaymentRequest(BaseModel):
    """Confirm payment request, built from the gateway's success callback."""

    transaction_id: str  # UUID string from the callback URL
    validation_id: str | None = None  # val_id from the callback body


class ConfirmPaymentResponse(BaseModel):
    """Confirm payment response."""

    transaction_id: str
    status: TransactionStatus
    newly_paid: bool


class ConfirmPaymentUseCase(BaseUseCase):
    """Use case for reconciling a gateway success callback."""

    def __init__(self, payment_service: PaymentService) -> None:
        """Initialize confirm payment use case.

        Args:
            payment_service: Payment domain service
        """
        self.payment_service = payment_service

    async def execute(self, request: ConfirmPaymentRequest) -> ConfirmPaymentResponse:
        """Execute confirm payment flow.

        Raises:
            InvalidIdentifierError: If transaction_id is not a UUID
            TransactionNotFoundError: If the transaction is unknown
            CallbackVerificationError: If the gateway does not vouch for it
        """
        transaction_id = TransactionId(
            parse_identifier(request.transaction_id, "transaction")
        )

        result = await self.payment_service.confirm_payment(
            transaction_id, request.validation_id
        )
        return ConfirmPaymentResponse(
            transaction_id=str(result.transaction_id),
            status=result.status,
            newly_paid=result.newly_paid,
        )
