"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.transaction import TransactionRepository

__all__ = [
    "CommentRepository",
    "TransactionRepository",
]
