"""
Application state for the gateway.

Holds the downstream HTTP clients created during lifespan startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.clock import Uptime

if TYPE_CHECKING:
    from gateway.clients import BackendClient, ProductServiceClient, UserServiceClient


class AppState(Uptime):
    """
    Runtime state: start time plus one client per downstream.

    Reading a client before startup assigned it raises RuntimeError.
    """

    def __init__(self) -> None:
        super().__init__()
        self._user_client: UserServiceClient | None = None
        self._product_client: ProductServiceClient | None = None

    @property
    def user_client(self) -> UserServiceClient:
        """Client for the user service."""
        if self._user_client is None:
            raise RuntimeError("User service client not initialized")
        return self._user_client

    @user_client.setter
    def user_client(self, value: UserServiceClient) -> None:
        self._user_client = value

    @property
    def product_client(self) -> ProductServiceClient:
        """Client for the product service."""
        if self._product_client is None:
            raise RuntimeError("Product service client not initialized")
        return self._product_client

    @product_client.setter
    def product_client(self, value: ProductServiceClient) -> None:
        self._product_client = value

    @property
    def downstreams(self) -> list[BackendClient]:
        """Every configured downstream, in health-report order."""
        return [self.user_client, self.product_client]


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
