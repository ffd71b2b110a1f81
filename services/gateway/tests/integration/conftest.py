"""
Shared fixtures for integration tests.

Integration tests run the real gateway application, lifespan included, with
HTTP-level mocking of the downstream services through respx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from gateway.app import create_app

if TYPE_CHECKING:
    from collections.abc import Iterator

# Downstream URLs (must match the test config)
USER_SERVICE_URL = "http://users.test"
PRODUCT_SERVICE_URL = "http://products.test"

USERS_LISTING = {
    "success": True,
    "data": [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}],
    "count": 2,
}
PRODUCTS_LISTING = {
    "success": True,
    "data": [{"id": 1, "name": "Laptop"}],
    "count": 1,
    "filters": {},
}


@pytest.fixture
def backends() -> Iterator[respx.MockRouter]:
    """
    Mock both downstreams as healthy.

    Routes are named so tests can replace a single behaviour, e.g.
    ``backends["product_health"].mock(side_effect=httpx.ConnectError)``.
    """
    with respx.mock(assert_all_called=False) as router:
        router.get(f"{USER_SERVICE_URL}/health", name="user_health").mock(
            return_value=httpx.Response(200, json={"status": "healthy"})
        )
        router.get(f"{PRODUCT_SERVICE_URL}/health", name="product_health").mock(
            return_value=httpx.Response(200, json={"status": "healthy"})
        )
        router.get(f"{USER_SERVICE_URL}/users", name="user_list").mock(
            return_value=httpx.Response(200, json=USERS_LISTING)
        )
        router.route(
            method="GET",
            host="products.test",
            path="/products",
            name="product_list",
        ).mock(
            return_value=httpx.Response(200, json=PRODUCTS_LISTING)
        )
        yield router


@pytest.fixture
def client(backends: respx.MockRouter) -> Iterator[TestClient]:  # noqa: ARG001
    """Test client for the real gateway with lifespan events."""
    app = create_app()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
