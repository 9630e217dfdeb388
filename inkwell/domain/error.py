"""Domain layer errors.

Every error carries a stable ``kind`` that the HTTP layer reports to
callers alongside the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    kind: str = "DomainError"


class UnauthorizedError(DomainError):
    """Raised when a session credential is missing or invalid."""

    kind = "Unauthorized"


class ForbiddenError(DomainError):
    """Raised when a valid session acts on someone else's behalf."""

    kind = "Forbidden"


class InvalidIdentifierError(DomainError):
    """Raised when an identifier is not in canonical UUID form."""

    kind = "InvalidIdentifier"

    def __init__(self, resource: str, value: str):
        self.resource = resource
        self.value = value
        super().__init__(f"Invalid {resource} identifier: {value!r}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "NotFound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ReplyNotFoundError(DomainError):
    """Raised when a comment exists but holds no reply with the given id."""

    kind = "ReplyNotFound"

    def __init__(self, comment_id: str, reply_id: str):
        self.comment_id = comment_id
        self.reply_id = reply_id
        super().__init__(f"Reply {reply_id} not found in comment {comment_id}")


class TransactionNotFoundError(DomainError):
    """Raised when a payment callback references an unknown transaction."""

    kind = "TransactionNotFound"

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class ConcurrentModificationError(DomainError):
    """Raised when an optimistic write loses against a concurrent writer.

    The replies of a comment are rewritten as a whole; the write only
    lands if the comment's version is still the one that was read.
    """

    kind = "Conflict"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} was modified concurrently, reload and retry"
        )


class CallbackVerificationError(DomainError):
    """Raised when a gateway callback cannot be verified with the gateway."""

    kind = "CallbackVerificationFailed"


class GatewayError(DomainError):
    """Raised when the external payment gateway call fails."""

    kind = "GatewayError"


class StoreError(DomainError):
    """Raised when the underlying document store fails."""

    kind = "StoreError"
