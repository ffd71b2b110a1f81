"""
Shared fixtures for unit tests.

Routers are exercised against an app whose catalog dependency is overridden,
so no lifespan runs and each test owns its catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from catalog_service.services.product_catalog import ProductCatalog

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def catalog() -> ProductCatalog:
    """A freshly seeded catalog."""
    return ProductCatalog.seeded()


@pytest.fixture
def mock_app_state(catalog: ProductCatalog) -> MagicMock:
    """App state stand-in exposing the test catalog."""
    state = MagicMock()
    state.catalog = catalog
    state.uptime_seconds = 123.45
    state.uptime_formatted = "2m 3s"
    return state


@pytest.fixture
def test_client(catalog: ProductCatalog, mock_app_state: MagicMock) -> Iterator[TestClient]:
    """Test client for the real app with the catalog dependency overridden."""
    from catalog_service.app import create_app  # noqa: PLC0415
    from catalog_service.core.state import get_catalog  # noqa: PLC0415

    app = create_app()
    app.dependency_overrides[get_catalog] = lambda: catalog

    with patch("catalog_service.routers.info.get_app_state", return_value=mock_app_state):
        yield TestClient(app, raise_server_exceptions=False)
