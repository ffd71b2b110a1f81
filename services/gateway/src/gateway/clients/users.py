"""
Client for the User service.

The user service is an external collaborator; only its /health, /users and
/users* contract is relied upon.
"""

from __future__ import annotations

from typing import Any

from gateway.clients.base import BackendClient


class UserServiceClient(BackendClient):
    """Client for the User service."""

    gateway_prefix = "/api/users"
    resource_prefix = "/users"

    async def list_users(self, timeout: float) -> Any:
        """Fetch the full user listing (object with a ``count`` field)."""
        return await self.fetch_json(self.resource_prefix, timeout=timeout)
