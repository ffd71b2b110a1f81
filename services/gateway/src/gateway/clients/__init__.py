"""HTTP clients for downstream services."""

from gateway.clients.base import BackendClient, HealthProbe
from gateway.clients.products import ProductServiceClient
from gateway.clients.users import UserServiceClient

__all__ = [
    "BackendClient",
    "HealthProbe",
    "ProductServiceClient",
    "UserServiceClient",
]
