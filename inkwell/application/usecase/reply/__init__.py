"""Reply use cases."""

from .add_reply import AddReplyRequest, AddReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
