"""HTTP rendering of domain errors.

Every domain error becomes ``{"error": kind, "detail": message}`` with a
status code chosen by its class.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from inkwell.domain.error import (
    CallbackVerificationError,
    ConcurrentModificationError,
    DomainError,
    ForbiddenError,
    GatewayError,
    InvalidIdentifierError,
    NotFoundError,
    ReplyNotFoundError,
    StoreError,
    TransactionNotFoundError,
    UnauthorizedError,
)


class ErrorResponse(BaseModel):
    """Structured failure returned to callers."""

    error: str
    detail: str


STATUS_BY_ERROR: dict[type[DomainError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ReplyNotFoundError: status.HTTP_404_NOT_FOUND,
    TransactionNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidIdentifierError: status.HTTP_400_BAD_REQUEST,
    CallbackVerificationError: status.HTTP_400_BAD_REQUEST,
    ConcurrentModificationError: status.HTTP_409_CONFLICT,
    GatewayError: status.HTTP_502_BAD_GATEWAY,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, following its class hierarchy."""
    for klass in type(error).__mro__:
        if klass in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(kind: str, detail: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=kind, detail=detail).model_dump(),
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError."""
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            kind=exc.kind,
            error=str(exc),
            path=request.url.path,
        )
    return error_response(exc.kind, str(exc), status_code)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Render anything else as an opaque internal error."""
    logfire.exception("Unexpected error", path=request.url.path, error=str(exc))
    return error_response(
        "InternalError", "Unexpected server error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain and fallback exception handlers."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
