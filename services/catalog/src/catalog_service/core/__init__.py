"""Core infrastructure components."""

from catalog_service.core.exceptions import ServiceError
from catalog_service.core.state import AppState, get_app_state, get_catalog, init_app_state

__all__ = ["AppState", "ServiceError", "get_app_state", "get_catalog", "init_app_state"]
