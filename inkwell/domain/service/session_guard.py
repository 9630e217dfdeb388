"""Session guard domain service."""

from datetime import datetime

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.error import UnauthorizedError
from inkwell.domain.model.common import DomainModel
from inkwell.util.jwt import JWTError, create_token, verify_token

from .base import Service


class SessionClaims(DomainModel):
    """Decoded claims of a valid session credential."""

    subject: str
    name: str | None = None
    issued_at: datetime
    expires_at: datetime


class SessionGuard(Service):
    """Issues and checks the signed session credential.

    Authentication is pure: it only checks the signature and validity window
    of the token and never reads from the store.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session guard.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, subject: str, name: str | None = None) -> str:
        """Issue a signed credential for a subject.

        Args:
            subject: Identity to vouch for
            name: Optional display name

        Returns:
            Signed token string
        """
        with logfire.span("session_guard.issue", subject=subject):
            token = create_token(subject, name, self.auth_settings)
            logfire.info("Session issued", subject=subject)
            return token

    def authenticate(self, token: str | None) -> SessionClaims:
        """Authenticate a request credential.

        Args:
            token: Credential presented by the caller, if any

        Returns:
            Decoded session claims

        Raises:
            UnauthorizedError: If the token is missing, tampered, malformed
                or outside its validity window
        """
        if not token:
            logfire.info("Request without session credential")
            raise UnauthorizedError("Not authenticated")

        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Session credential rejected", error=str(e))
            raise UnauthorizedError(str(e)) from e

        return SessionClaims(
            subject=payload.sub,
            name=payload.name,
            issued_at=payload.iat,
            expires_at=payload.exp,
        )

    def get_subject(self, token: str | None) -> str | None:
        """Extract the subject without raising.

        Convenience for routes that authenticate optionally.

        Args:
            token: Credential, optional

        Returns:
            Subject if the token is valid, None otherwise
        """
        try:
            return self.authenticate(token).subject
        except UnauthorizedError:
            return None
