"""
Shared fixtures for unit tests.

Downstream clients are mocked so router tests run without network access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.clients import HealthProbe, ProductServiceClient, UserServiceClient

if TYPE_CHECKING:
    from collections.abc import Iterator

USERS_LISTING = {"success": True, "data": [{"id": 1}, {"id": 2}], "count": 2}
PRODUCTS_LISTING = {"success": True, "data": [{"id": 1}, {"id": 2}, {"id": 3}], "count": 3}


def _mock_client(spec: type, service_name: str, base_url: str) -> AsyncMock:
    client = AsyncMock(spec=spec)
    client.service_name = service_name
    client.base_url = base_url
    client.gateway_prefix = spec.gateway_prefix
    client.resource_prefix = spec.resource_prefix
    client.health_check.return_value = HealthProbe(healthy=True, error=None)
    client.forward.return_value = httpx.Response(
        200,
        json={"success": True},
    )
    return client


@pytest.fixture
def mock_user_client() -> AsyncMock:
    """Create a mock user service client."""
    client = _mock_client(UserServiceClient, "user-service", "http://users.test")
    client.list_users.return_value = USERS_LISTING
    return client


@pytest.fixture
def mock_product_client() -> AsyncMock:
    """Create a mock product service client."""
    client = _mock_client(ProductServiceClient, "product-service", "http://products.test")
    client.list_products.return_value = PRODUCTS_LISTING
    return client


@pytest.fixture
def mock_app_state(mock_user_client: AsyncMock, mock_product_client: AsyncMock) -> MagicMock:
    """Create mock app state with mock clients."""
    mock_state = MagicMock()
    mock_state.user_client = mock_user_client
    mock_state.product_client = mock_product_client
    mock_state.downstreams = [mock_user_client, mock_product_client]
    mock_state.uptime_seconds = 123.45
    mock_state.uptime_formatted = "2m 3s"
    return mock_state


@pytest.fixture
def test_client(mock_app_state: MagicMock) -> Iterator[TestClient]:
    """Test client for the real app with app state patched, lifespan not run."""
    from gateway.app import create_app  # noqa: PLC0415

    app = create_app()

    with (
        patch("gateway.routers.health.get_app_state", return_value=mock_app_state),
        patch("gateway.routers.info.get_app_state", return_value=mock_app_state),
        patch("gateway.routers.proxy.get_app_state", return_value=mock_app_state),
        patch("gateway.routers.dashboard.get_app_state", return_value=mock_app_state),
    ):
        yield TestClient(app, raise_server_exceptions=False)
