"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, PaymentSettings, Settings
from inkwell.domain.repository import CommentRepository, TransactionRepository
from inkwell.domain.service import (
    CommentService,
    PaymentGateway,
    PaymentService,
    ReplyLedger,
    SessionGuard,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_session_guard(self, auth_settings: AuthSettings) -> SessionGuard:
        """Provide session guard.

        APP-scoped: it holds only the signing settings and never touches the store.
        """
        return SessionGuard(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_reply_ledger(self, comment_repository: CommentRepository) -> ReplyLedger:
        """Provide reply ledger domain service."""
        return ReplyLedger(comment_repository=comment_repository)

    @provide
    def get_payment_service(
        self,
        transaction_repository: TransactionRepository,
        gateway: PaymentGateway,
        payment_settings: PaymentSettings,
        settings: Settings,
    ) -> PaymentService:
        """Provide payment domain service.

        Gateway callbacks are built from the public API base URL.
        """
        return PaymentService(
            transaction_repository=transaction_repository,
            gateway=gateway,
            payment_settings=payment_settings,
            callback_base_url=settings.api.base_url,
        )
