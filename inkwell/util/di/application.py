"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.auth import (
    CreateSessionUseCase,
    GetCurrentSessionUseCase,
)
from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from inkwell.application.usecase.payment import (
    ConfirmPaymentUseCase,
    GetTransactionUseCase,
    InitiateCheckoutUseCase,
    ListTransactionsUseCase,
)
from inkwell.application.usecase.reply import (
    AddReplyUseCase,
    DeleteReplyUseCase,
    UpdateReplyUseCase,
)
from inkwell.config import AuthSettings
from inkwell.domain.service import (
    CommentService,
    PaymentService,
    ReplyLedger,
    SessionGuard,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_create_session_use_case(
        self, session_guard: SessionGuard, auth_settings: AuthSettings
    ) -> CreateSessionUseCase:
        """Provide create session use case."""
        return CreateSessionUseCase(
            session_guard=session_guard, auth_settings=auth_settings
        )

    @provide
    def get_current_session_use_case(
        self, session_guard: SessionGuard
    ) -> GetCurrentSessionUseCase:
        """Provide get current session use case."""
        return GetCurrentSessionUseCase(session_guard=session_guard)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide
    def get_add_reply_use_case(self, reply_ledger: ReplyLedger) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(reply_ledger=reply_ledger)

    @provide
    def get_update_reply_use_case(
        self, reply_ledger: ReplyLedger
    ) -> UpdateReplyUseCase:
        """Provide update reply use case."""
        return UpdateReplyUseCase(reply_ledger=reply_ledger)

    @provide
    def get_delete_reply_use_case(
        self, reply_ledger: ReplyLedger
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(reply_ledger=reply_ledger)

    # Payment use cases
    @provide
    def get_initiate_checkout_use_case(
        self, payment_service: PaymentService
    ) -> InitiateCheckoutUseCase:
        """Provide initiate checkout use case."""
        return InitiateCheckoutUseCase(payment_service=payment_service)

    @provide
    def get_confirm_payment_use_case(
        self, payment_service: PaymentService
    ) -> ConfirmPaymentUseCase:
        """Provide confirm payment use case."""
        return ConfirmPaymentUseCase(payment_service=payment_service)

    @provide
    def get_get_transaction_use_case(
        self, payment_service: PaymentService
    ) -> GetTransactionUseCase:
        """Provide get transaction use case."""
        return GetTransactionUseCase(payment_service=payment_service)

    @provide
    def get_list_transactions_use_case(
        self, payment_service: PaymentService
    ) -> ListTransactionsUseCase:
        """Provide list transactions use case."""
        return ListTransactionsUseCase(payment_service=payment_service)
