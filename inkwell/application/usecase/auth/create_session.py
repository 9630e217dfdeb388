"""Create session use case."""

import hmac
from datetime import datetime

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.config import AuthSettings
from inkwell.domain.error import UnauthorizedError
from inkwell.domain.service import SessionGuard
from inkwell.domain.value import Email


class CreateSessionRequest(BaseModel):
    """Create session request."""

    email: Email
    name: str | None = None
    issuer_key: str | None = None  # Must match auth.issuer_key when configured


class CreateSessionResponse(BaseModel):
    """Create session response."""

    token: str
    subject: str
    name: str | None
    issued_at: datetime
    expires_at: datetime


class CreateSessionUseCase(BaseUseCase):
    """Use case for issuing a session credential."""

    def __init__(self, session_guard: SessionGuard, auth_settings: AuthSettings) -> None:
        """Initialize create session use case.

        Args:
            session_guard: Session guard domain service
            auth_settings: Authentication settings
        """
        self.session_guard = session_guard
        self.auth_settings = auth_settings

    async def execute(self, request: CreateSessionRequest) -> CreateSessionResponse:
        """Execute create session flow.

        Steps:
        1. Check the issuer key if one is configured
        2. Sign a credential for the e-mail
        3. Decode it again to report its validity window

        Raises:
            UnauthorizedError: If the issuer key is missing or wrong
        """
        expected = self.auth_settings.issuer_key
        if expected is not None and not hmac.compare_digest(
            (request.issuer_key or "").encode(), expected.encode()
        ):
            logfire.warn("Session request with bad issuer key")
            raise UnauthorizedError("Invalid issuer key")

        token = self.session_guard.issue(request.email.root, request.name)
        claims = self.session_guard.authenticate(token)

        return CreateSessionResponse(
            token=token,
            subject=claims.subject,
            name=claims.name,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )
