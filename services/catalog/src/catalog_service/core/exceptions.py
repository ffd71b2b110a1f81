"""Exception handlers for consistent error envelopes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.exceptions import ServiceError
from service_commons.exceptions import (
    register_exception_handlers as register_common_exception_handlers,
)

from catalog_service.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = [
    "ServiceError",
    "not_found",
    "register_exception_handlers",
]


def not_found() -> ServiceError:
    """Build the failure raised for an unknown or malformed product id."""
    return ServiceError(
        error="not_found",
        message="Product not found",
        status_code=404,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""
    register_common_exception_handlers(app, get_logger)
