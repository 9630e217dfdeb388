"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    CommentId,
    PostId,
    ReplyId,
    TransactionId,
    parse_identifier,
)
from inkwell.domain.value.types import (
    Author,
    Customer,
    Email,
    TransactionStatus,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "ReplyId",
    "TransactionId",
    "parse_identifier",
    # Types
    "Author",
    "Customer",
    "Email",
    "TransactionStatus",
]
