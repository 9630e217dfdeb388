"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .payment_service import (
    CheckoutResult,
    ConfirmationResult,
    GatewayCheckoutRequest,
    GatewayCheckoutSession,
    GatewayValidation,
    PaymentGateway,
    PaymentService,
)
from .reply_ledger import ReplyLedger
from .session_guard import SessionClaims, SessionGuard

__all__ = [
    "CheckoutResult",
    "CommentService",
    "ConfirmationResult",
    "GatewayCheckoutRequest",
    "GatewayCheckoutSession",
    "GatewayValidation",
    "PaymentGateway",
    "PaymentService",
    "ReplyLedger",
    "Service",
    "SessionClaims",
    "SessionGuard",
]
