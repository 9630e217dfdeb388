"""Infrastructure providers."""

# Import bases
from .gateway import GatewayProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .gateway import ProdGatewayProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GatewayProvider",
    "PersistenceProvider",
    "ProdGatewayProvider",
    "ProdPersistenceProvider",
]
