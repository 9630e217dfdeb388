"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.transaction import PostgresTransactionRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresTransactionRepository",
]
