"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator

from inkwell.domain.value.common import RootValueObject, ValueObject


class TransactionStatus(str, Enum):
    """Status of a payment transaction.

    Transitions only go from PENDING to PAID; PAID is terminal.
    """

    PENDING = "pending"
    PAID = "paid"


class Email(RootValueObject[str]):
    """E-mail address used to identify authors and customers."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate a minimal local@domain shape and normalise case."""
        v = v.strip()
        local, sep, domain = v.partition("@")
        if not sep or not local or "." not in domain:
            raise ValueError("Email must look like local@domain")
        if len(v) > 254:
            raise ValueError("Email must be at most 254 characters")
        return v.lower()


class Author(ValueObject):
    """Snapshot of the posting user taken when a comment or reply is written.

    The snapshot is denormalised on purpose: later profile changes do not
    rewrite historic comments.
    """

    name: str = Field(min_length=1, max_length=255)
    email: Email
    photo_ref: str | None = None


class Customer(ValueObject):
    """Customer details sent to the payment gateway."""

    name: str = Field(min_length=1, max_length=255)
    email: Email
    phone: str | None = Field(default=None, max_length=32)
