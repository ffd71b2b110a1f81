"""Fixtures for client unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import respx

from gateway.clients import ProductServiceClient, UserServiceClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

USERS_URL = "http://users.test"
PRODUCTS_URL = "http://products.test"


@pytest.fixture
def backend_mock() -> Iterator[respx.MockRouter]:
    """respx router intercepting every downstream call."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
async def user_client() -> AsyncIterator[UserServiceClient]:
    """Create a UserServiceClient pointed at the mocked user service."""
    client = UserServiceClient(
        base_url=USERS_URL,
        service_name="user-service",
        label="User service",
        health_timeout=5.0,
        proxy_timeout=10.0,
    )
    yield client
    await client.close()


@pytest.fixture
async def product_client() -> AsyncIterator[ProductServiceClient]:
    """Create a ProductServiceClient pointed at the mocked product service."""
    client = ProductServiceClient(
        base_url=PRODUCTS_URL,
        service_name="product-service",
        label="Product service",
        health_timeout=5.0,
        proxy_timeout=10.0,
    )
    yield client
    await client.close()
