"""Payment orchestration domain service."""

from decimal import Decimal
from uuid import uuid4

import logfire

from inkwell.config import PaymentSettings
from inkwell.domain.error import CallbackVerificationError, TransactionNotFoundError
from inkwell.domain.model.common import DomainModel, utc_now
from inkwell.domain.model.transaction import PaymentTransaction
from inkwell.domain.repository import TransactionRepository
from inkwell.domain.value import Customer, Email, TransactionId, TransactionStatus

from .base import Service

VALID_GATEWAY_STATUSES = frozenset({"VALID", "VALIDATED"})


class GatewayCheckoutRequest(DomainModel):
    """Everything the gateway needs to open a hosted checkout session."""

    transaction_id: TransactionId
    amount: Decimal
    currency: str
    customer: Customer
    success_url: str
    fail_url: str
    cancel_url: str


class GatewayCheckoutSession(DomainModel):
    """Hosted checkout session opened by the gateway."""

    redirect_url: str
    session_key: str | None = None


class GatewayValidation(DomainModel):
    """Gateway's own account of a payment, looked up by validation id."""

    status: str
    transaction_id: str
    amount: Decimal
    currency: str


class PaymentGateway:
    """Hosted checkout gateway interface."""

    async def initiate_checkout(
        self, request: GatewayCheckoutRequest
    ) -> GatewayCheckoutSession:
        """Open a checkout session.

        Args:
            request: Checkout details including callback URLs

        Returns:
            Session with the URL the customer must be redirected to

        Raises:
            GatewayError: If the gateway is unreachable or refuses the session
        """
        raise NotImplementedError

    async def validate_payment(self, validation_id: str) -> GatewayValidation:
        """Look up a payment by the validation id passed to the success callback.

        Args:
            validation_id: Validation id from the callback

        Returns:
            The gateway's record of the payment

        Raises:
            GatewayError: If the lookup fails
        """
        raise NotImplementedError


class CheckoutResult(DomainModel):
    """Outcome of starting a checkout."""

    transaction_id: TransactionId
    redirect_url: str


class ConfirmationResult(DomainModel):
    """Outcome of a confirmation callback."""

    transaction_id: TransactionId
    status: TransactionStatus
    newly_paid: bool


class PaymentService(Service):
    """Domain service for the checkout lifecycle.

    A transaction id is generated locally before the gateway is contacted
    and correlates the later confirmation callback with the pending record.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        gateway: PaymentGateway,
        payment_settings: PaymentSettings,
        callback_base_url: str,
    ) -> None:
        """Initialize payment service.

        Args:
            transaction_repository: Transaction repository
            gateway: Payment gateway client
            payment_settings: Payment settings
            callback_base_url: Public base URL the gateway calls back to
        """
        self.transaction_repository = transaction_repository
        self.gateway = gateway
        self.payment_settings = payment_settings
        self.callback_base_url = callback_base_url.rstrip("/")

    async def initiate_checkout(
        self, customer: Customer, amount: Decimal, currency: str | None = None
    ) -> CheckoutResult:
        """Start a checkout and persist a pending transaction.

        Nothing is persisted when the gateway call fails.

        Args:
            customer: Paying customer
            amount: Amount to charge
            currency: ISO currency code, defaults to the configured currency

        Returns:
            Transaction id and gateway redirect URL

        Raises:
            GatewayError: If the gateway call fails
        """
        transaction_id = TransactionId(uuid4())
        currency = (currency or self.payment_settings.currency).upper()

        with logfire.span(
            "payment_service.initiate_checkout",
            transaction_id=str(transaction_id),
            amount=str(amount),
            currency=currency,
        ):
            session = await self.gateway.initiate_checkout(
                GatewayCheckoutRequest(
                    transaction_id=transaction_id,
                    amount=amount,
                    currency=currency,
                    customer=customer,
                    success_url=f"{self.callback_base_url}/success/{transaction_id}",
                    fail_url=f"{self.callback_base_url}/fail/{transaction_id}",
                    cancel_url=f"{self.callback_base_url}/cancel/{transaction_id}",
                )
            )

            transaction = PaymentTransaction(
                id=transaction_id,
                customer=customer,
                amount=amount,
                currency=currency,
                gateway_session=session.session_key,
            )
            await self.transaction_repository.insert(transaction)

            logfire.info(
                "Checkout initiated",
                transaction_id=str(transaction_id),
                customer_email=customer.email.root,
            )
            return CheckoutResult(
                transaction_id=transaction_id, redirect_url=session.redirect_url
            )

    async def confirm_payment(
        self, transaction_id: TransactionId, validation_id: str | None = None
    ) -> ConfirmationResult:
        """Reconcile a success callback with the pending transaction.

        Safe to call repeatedly for the same transaction: once paid, further
        calls succeed without writing.

        Args:
            transaction_id: Transaction ID from the callback URL
            validation_id: Gateway validation id from the callback body

        Returns:
            Confirmation result

        Raises:
            TransactionNotFoundError: If the transaction is unknown
            CallbackVerificationError: If the gateway does not vouch for the payment
            GatewayError: If the validation lookup fails
        """
        with logfire.span(
            "payment_service.confirm_payment", transaction_id=str(transaction_id)
        ):
            transaction = await self._load(transaction_id)

            if transaction.is_paid:
                logfire.info(
                    "Duplicate payment confirmation ignored",
                    transaction_id=str(transaction_id),
                )
                return ConfirmationResult(
                    transaction_id=transaction_id,
                    status=transaction.status,
                    newly_paid=False,
                )

            if self.payment_settings.verify_callbacks:
                await self._verify_with_gateway(transaction, validation_id)

            marked = await self.transaction_repository.mark_paid(
                transaction_id, utc_now(), validation_id
            )
            if not marked:
                # A concurrent callback got there first
                current = await self._load(transaction_id)
                logfire.info(
                    "Payment already confirmed concurrently",
                    transaction_id=str(transaction_id),
                    status=current.status.value,
                )
                return ConfirmationResult(
                    transaction_id=transaction_id,
                    status=current.status,
                    newly_paid=False,
                )

            logfire.info("Payment confirmed", transaction_id=str(transaction_id))
            return ConfirmationResult(
                transaction_id=transaction_id,
                status=TransactionStatus.PAID,
                newly_paid=True,
            )

    async def get_transaction(self, transaction_id: TransactionId) -> PaymentTransaction:
        """Get a transaction by ID.

        Raises:
            TransactionNotFoundError: If the transaction is unknown
        """
        with logfire.span(
            "payment_service.get_transaction", transaction_id=str(transaction_id)
        ):
            return await self._load(transaction_id)

    async def list_transactions_for_customer(
        self, email: Email
    ) -> list[PaymentTransaction]:
        """List a customer's transactions, newest first."""
        with logfire.span(
            "payment_service.list_transactions_for_customer", email=email.root
        ):
            transactions = await self.transaction_repository.find_by_customer_email(
                email
            )
            logfire.info(
                "Transactions retrieved", email=email.root, count=len(transactions)
            )
            return transactions

    async def _load(self, transaction_id: TransactionId) -> PaymentTransaction:
        transaction = await self.transaction_repository.find_by_id(transaction_id)
        if not transaction:
            logfire.warn("Transaction not found", transaction_id=str(transaction_id))
            raise TransactionNotFoundError(str(transaction_id))
        return transaction

    async def _verify_with_gateway(
        self, transaction: PaymentTransaction, validation_id: str | None
    ) -> None:
        if not validation_id:
            logfire.warn(
                "Callback without validation id", transaction_id=str(transaction.id)
            )
            raise CallbackVerificationError("Callback carries no validation id")

        validation = await self.gateway.validate_payment(validation_id)

        problems = []
        if validation.status.upper() not in VALID_GATEWAY_STATUSES:
            problems.append(f"status {validation.status}")
        if validation.transaction_id.strip().lower() != str(transaction.id):
            problems.append("transaction id mismatch")
        if validation.amount != transaction.amount:
            problems.append("amount mismatch")
        if validation.currency.upper() != transaction.currency:
            problems.append("currency mismatch")

        if problems:
            logfire.warn(
                "Callback verification failed",
                transaction_id=str(transaction.id),
                validation_id=validation_id,
                problems=problems,
            )
            raise CallbackVerificationError(
                "Gateway did not confirm payment: " + ", ".join(problems)
            )
