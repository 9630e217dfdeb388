"""Strongly typed identifiers for Inkwell domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from inkwell.domain.error import InvalidIdentifierError

# Core domain entity identifiers
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)
TransactionId = NewType("TransactionId", UUID)


def parse_identifier(value: str, resource: str) -> UUID:
    """Parse an identifier string into its canonical UUID form.

    Identity checks compare the parsed values, so two spellings of the same
    UUID (case, braces, hyphenation) match while look-alike strings don't.

    Args:
        value: Identifier as received from the caller
        resource: Resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidIdentifierError: If the value is not a valid UUID
    """
    try:
        return UUID(value.strip())
    except (AttributeError, ValueError):
        raise InvalidIdentifierError(resource, str(value))
