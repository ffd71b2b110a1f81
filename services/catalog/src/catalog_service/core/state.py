"""
Application state for the catalog service.

The state exists between lifespan startup and shutdown and owns the product
catalog that request handlers reach through ``get_catalog``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.clock import Uptime
from service_commons.exceptions import ServiceError

if TYPE_CHECKING:
    from catalog_service.services.product_catalog import ProductCatalog


class AppState(Uptime):
    """Runtime state: start time plus the catalog created at startup."""

    def __init__(self) -> None:
        super().__init__()
        self.catalog: ProductCatalog | None = None


# Initialized in lifespan context
_app_state: AppState | None = None


def get_app_state() -> AppState:
    """
    Get the current application state.

    Raises:
        RuntimeError: If called before app startup
    """
    if _app_state is None:
        raise RuntimeError("Application state not initialized")
    return _app_state


def init_app_state() -> AppState:
    """Initialize application state. Called during startup."""
    global _app_state  # noqa: PLW0603 - process-wide singleton
    _app_state = AppState()
    return _app_state


def reset_app_state() -> None:
    """Reset application state. Used in testing."""
    global _app_state  # noqa: PLW0603 - process-wide singleton
    _app_state = None


def get_catalog() -> ProductCatalog:
    """
    FastAPI dependency resolving the product catalog.

    Raises:
        ServiceError: If no catalog has been created (startup did not run)
    """
    state = _app_state
    if state is None or state.catalog is None:
        raise ServiceError(
            error="service_unavailable",
            message="Product catalog is not initialized",
            status_code=503,
        )
    return state.catalog
