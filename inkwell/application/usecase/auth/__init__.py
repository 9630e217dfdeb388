"""Authentication use cases."""

from .create_session import (
    CreateSessionRequest,
    CreateSessionResponse,
    CreateSessionUseCase,
)
from .get_current_session import (
    GetCurrentSessionRequest,
    GetCurrentSessionResponse,
    GetCurrentSessionUseCase,
)

__all__ = [
    "CreateSessionRequest",
    "CreateSessionResponse",
    "CreateSessionUseCase",
    "GetCurrentSessionRequest",
    "GetCurrentSessionResponse",
    "GetCurrentSessionUseCase",
]
