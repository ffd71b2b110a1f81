"""
Shared fixtures for integration tests.

Integration tests run the real application, lifespan included, so every test
starts from a freshly seeded catalog.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from catalog_service.app import create_app

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client for the real application with lifespan events."""
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
