"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from inkwell.application.usecase.auth import (
    CreateSessionRequest,
    CreateSessionUseCase,
    GetCurrentSessionRequest,
    GetCurrentSessionResponse,
    GetCurrentSessionUseCase,
)
from inkwell.config import AuthSettings
from inkwell.domain.error import UnauthorizedError
from inkwell.domain.value import Email

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

AUTH_COOKIE = "auth_token"


class CreateSessionAPIRequest(BaseModel):
    """Session request sent by the identity provider or a dev client."""

    email: Email
    name: str | None = None
    issuer_key: str | None = None


class AuthStatusResponse(BaseModel):
    """Authentication status."""

    authenticated: bool
    session: GetCurrentSessionResponse | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post("/session", response_model=AuthStatusResponse)
async def create_session(
    request: CreateSessionAPIRequest,
    response: Response,
    create_session_use_case: FromDishka[CreateSessionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> AuthStatusResponse:
    """Issue a session credential and store it in an HTTP-only cookie.

    Args:
        request: Identity to issue the session for
        response: FastAPI response object
        create_session_use_case: Create session use case from DI
        auth_settings: Auth settings from DI

    Returns:
        The new session

    Raises:
        UnauthorizedError: If the issuer key is wrong
    """
    session = await create_session_use_case.execute(
        CreateSessionRequest(
            email=request.email,
            name=request.name,
            issuer_key=request.issuer_key,
        )
    )

    response.set_cookie(
        key=AUTH_COOKIE,
        value=session.token,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite=auth_settings.cookie_samesite,
        domain=auth_settings.cookie_domain,
        path="/",
        max_age=auth_settings.cookie_max_age,
    )
    logfire.info("Auth cookie set", subject=session.subject)

    return AuthStatusResponse(
        authenticated=True,
        session=GetCurrentSessionResponse(
            subject=session.subject,
            name=session.name,
            issued_at=session.issued_at,
            expires_at=session.expires_at,
        ),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    auth_settings: FromDishka[AuthSettings],
) -> LogoutResponse:
    """Revoke the session by clearing the authentication cookie."""
    # Delete cookie with same domain/path as when it was created
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=auth_settings.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_session(
    get_current_session_use_case: FromDishka[GetCurrentSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get the current session if authenticated, or an unauthenticated status.

    Safe to call without a cookie: it answers authenticated=false instead of
    failing, so the frontend can check its state.
    """
    try:
        session = await get_current_session_use_case.execute(
            GetCurrentSessionRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, session=session)
    except UnauthorizedError:
        return AuthStatusResponse(authenticated=False)
