"""Mock providers for testing."""

from .gateway import MockGatewayProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGatewayProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
