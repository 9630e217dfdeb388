"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .transaction import InMemoryTransactionRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryTransactionRepository",
]
