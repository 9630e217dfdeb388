"""Domain model entities for Inkwell."""

from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.model.transaction import PaymentTransaction

__all__ = [
    "Comment",
    "Reply",
    "PaymentTransaction",
]
