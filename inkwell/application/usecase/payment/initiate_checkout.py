"""Initiate checkout use case."""

from decimal import Decimal

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import ForbiddenError
from inkwell.domain.service import PaymentService
from inkwell.domain.value import Customer, Email


class InitiateCheckoutRequest(BaseModel):
    """Initiate checkout request."""

    customer: Customer
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    currency: str | None = Field(default=None, min_length=3, max_length=3)


class InitiateCheckoutResponse(BaseModel):
    """Initiate checkout response."""

    transaction_id: str
    redirect_url: str


class InitiateCheckoutUseCase(BaseUseCase):
    """Use case for starting a hosted checkout."""

    def __init__(self, payment_service: PaymentService) -> None:
        """Initialize initiate checkout use case.

        Args:
            payment_service: Payment domain service
        """
        self.payment_service = payment_service

    async def execute(
        self, request: InitiateCheckoutRequest, subject: str
    ) -> InitiateCheckoutResponse:
        """Execute initiate checkout flow.

        Args:
            request: Checkout details from the client
            subject: E-mail of the signed-in session

        Steps:
        1. Check the customer is the signed-in user
        2. Generate the transaction id and open a gateway session
        3. Persist the pending transaction
        4. Return the redirect URL for the customer

        Raises:
            ForbiddenError: If the customer e-mail is not the session's
            GatewayError: If the gateway refuses or is unreachable
        """
        if request.customer.email != Email(subject):
            logfire.warn(
                "Checkout for another customer refused",
                subject=subject,
                customer_email=request.customer.email.root,
            )
            raise ForbiddenError("Checkout customer must be the signed-in user")

        result = await self.payment_service.initiate_checkout(
            customer=request.customer,
            amount=request.amount,
            currency=request.currency,
        )
        return InitiateCheckoutResponse(
            transaction_id=str(result.transaction_id),
            redirect_url=result.redirect_url,
        )
