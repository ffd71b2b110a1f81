"""
Client for the Product (catalog) service.
"""

from __future__ import annotations

from typing import Any

from gateway.clients.base import BackendClient


class ProductServiceClient(BackendClient):
    """Client for the Product service."""

    gateway_prefix = "/api/products"
    resource_prefix = "/products"

    async def list_products(self, timeout: float) -> Any:
        """Fetch the unfiltered product listing."""
        return await self.fetch_json(self.resource_prefix, timeout=timeout)
