"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded documents
(authors, replies, customers) travel as JSON-compatible dicts.
"""

from typing import Any, Dict, List, Sequence
from uuid import UUID

from inkwell.domain.model import Comment, PaymentTransaction, Reply
from inkwell.domain.value import (
    Author,
    CommentId,
    Customer,
    PostId,
    TransactionId,
    TransactionStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def reply_to_json(reply: Reply) -> Dict[str, Any]:
    """Convert a Reply to the JSON document embedded in its comment."""
    return reply.model_dump(mode="json")


def replies_to_json(replies: Sequence[Reply]) -> List[Dict[str, Any]]:
    """Convert an ordered reply sequence to a JSON array."""
    return [reply_to_json(reply) for reply in replies]


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model, replies in stored order
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author=Author.model_validate(row["author"]),
        text=row["text"],
        replies=tuple(Reply.model_validate(item) for item in row.get("replies") or []),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author": comment.author.model_dump(mode="json"),
        "text": comment.text,
        "replies": replies_to_json(comment.replies),
        "version": comment.version,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_transaction(row: Dict[str, Any]) -> PaymentTransaction:
    """Convert database row to PaymentTransaction domain model.

    Args:
        row: Database row as dict

    Returns:
        PaymentTransaction domain model
    """
    return PaymentTransaction(
        id=TransactionId(_uuid(row["id"])),
        customer=Customer.model_validate(row["customer"]),
        amount=row["amount"],
        currency=row["currency"],
        status=TransactionStatus(row["status"]),
        gateway_session=row.get("gateway_session"),
        validation_id=row.get("validation_id"),
        created_at=row["created_at"],
        paid_at=row.get("paid_at"),
    )


def transaction_to_dict(transaction: PaymentTransaction) -> Dict[str, Any]:
    """Convert PaymentTransaction domain model to database dict.

    Args:
        transaction: PaymentTransaction domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": transaction.id,
        "customer": transaction.customer.model_dump(mode="json"),
        "customer_email": transaction.customer.email.root,
        "amount": transaction.amount,
        "currency": transaction.currency,
        "status": transaction.status.value,
        "gateway_session": transaction.gateway_session,
        "validation_id": transaction.validation_id,
        "created_at": transaction.created_at,
        "paid_at": transaction.paid_at,
    }
