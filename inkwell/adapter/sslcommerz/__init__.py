"""SSLCommerz payment gateway adapter."""

from .client import (
    MockSSLCommerzGateway,
    RealSSLCommerzGateway,
    SSLCommerzError,
    SSLCommerzGateway,
)

__all__ = [
    "MockSSLCommerzGateway",
    "RealSSLCommerzGateway",
    "SSLCommerzError",
    "SSLCommerzGateway",
]
