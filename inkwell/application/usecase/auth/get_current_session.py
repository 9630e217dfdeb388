"""Get current session use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import SessionGuard


class GetCurrentSessionRequest(BaseModel):
    """Get current session request."""

    token: str | None  # Cookie value, if any


class GetCurrentSessionResponse(BaseModel):
    """Get current session response."""

    subject: str
    name: str | None
    issued_at: datetime
    expires_at: datetime


class GetCurrentSessionUseCase(BaseUseCase):
    """Use case for describing the caller's session."""

    def __init__(self, session_guard: SessionGuard) -> None:
        """Initialize get current session use case.

        Args:
            session_guard: Session guard domain service
        """
        self.session_guard = session_guard

    async def execute(
        self, request: GetCurrentSessionRequest
    ) -> GetCurrentSessionResponse:
        """Execute get current session flow.

        Raises:
            UnauthorizedError: If the token is missing or invalid
        """
        claims = self.session_guard.authenticate(request.token)
        return GetCurrentSessionResponse(
            subject=claims.subject,
            name=claims.name,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )
