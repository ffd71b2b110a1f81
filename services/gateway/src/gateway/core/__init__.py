"""Core infrastructure components."""

from gateway.core.exceptions import BackendError, ServiceError
from gateway.core.fanout import join_all_or_nothing, join_tolerant
from gateway.core.state import AppState, get_app_state, init_app_state

__all__ = [
    "AppState",
    "BackendError",
    "ServiceError",
    "get_app_state",
    "init_app_state",
    "join_all_or_nothing",
    "join_tolerant",
]
