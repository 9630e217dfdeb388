"""Payment use cases."""

from .confirm_payment import (
    ConfirmPaymentRequest,
    ConfirmPaymentResponse,
    ConfirmPaymentUseCase,
)
from .get_transaction import GetTransactionRequest, GetTransactionUseCase
from .initiate_checkout import (
    InitiateCheckoutRequest,
    InitiateCheckoutResponse,
    InitiateCheckoutUseCase,
)
from .list_transactions import (
    ListTransactionsRequest,
    ListTransactionsResponse,
    ListTransactionsUseCase,
)
from .view import TransactionItem

__all__ = [
    "ConfirmPaymentRequest",
    "ConfirmPaymentResponse",
    "ConfirmPaymentUseCase",
    "GetTransactionRequest",
    "GetTransactionUseCase",
    "InitiateCheckoutRequest",
    "InitiateCheckoutResponse",
    "InitiateCheckoutUseCase",
    "ListTransactionsRequest",
    "ListTransactionsResponse",
    "ListTransactionsUseCase",
    "TransactionItem",
]
