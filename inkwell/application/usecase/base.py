"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Each use case takes a pydantic request, parses identifiers and returns a
    pydantic response shaped for the HTTP layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
