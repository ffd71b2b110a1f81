"""
Exception types and handlers for consistent error envelopes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.exceptions import ServiceError, create_exception_handlers
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request
    from fastapi.responses import JSONResponse

__all__ = [
    "AVAILABLE_ROUTES",
    "BackendError",
    "ServiceError",
    "register_exception_handlers",
    "route_not_found",
]

AVAILABLE_ROUTES: list[str] = [
    "GET /",
    "GET /health",
    "GET /health/services",
    "GET /api/dashboard",
    "ALL /api/users/*",
    "ALL /api/products/*",
]


class BackendError(ServiceError):
    """
    Exception for unreachable downstream services.

    Raised when a downstream produced no response at all (connection
    refused, timeout). ``error`` carries the underlying error text.
    Downstream error responses are mirrored instead of raised.
    """

    # nosemgrep: no-default-parameter-values (optional details for exceptions)
    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 503,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(error, message, status_code, details)


def route_not_found() -> ServiceError:
    """Build the 404 raised for any request the gateway does not route."""
    return ServiceError(
        error=None,
        message="Route not found",
        status_code=404,
        details={"availableRoutes": AVAILABLE_ROUTES},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the app.

    The gateway has no 405: a method no route accepts (PROPFIND or another
    WebDAV verb) is an unmatched route like any other.
    """
    handlers = create_exception_handlers(get_logger)
    service_error_handler = handlers[ServiceError]
    http_error_handler = handlers[StarletteHTTPException]

    async def unmatched_method_handler(request: Request, exc: Exception) -> JSONResponse:
        if isinstance(exc, StarletteHTTPException) and exc.status_code == 405:
            return await service_error_handler(request, route_not_found())
        return await http_error_handler(request, exc)

    handlers[StarletteHTTPException] = unmatched_method_handler
    for exc_type, handler in handlers.items():
        app.add_exception_handler(exc_type, handler)
