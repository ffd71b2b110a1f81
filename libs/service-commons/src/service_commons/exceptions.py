"""
Shared exception primitives and handlers for services.

Every failure leaves a service as the JSON envelope
``{"success": false, "message": ..., "error": ..., **details}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
    from logging import Logger

    from fastapi import FastAPI, Request
    from starlette.requests import Request as StarletteRequest

    ExceptionHandler = Callable[
        [StarletteRequest, Exception],
        Coroutine[Any, Any, JSONResponse],
    ]
    LoggerFactory = Callable[[str], Logger]


class ServiceError(Exception):
    """
    Base exception for service errors.

    Attributes:
        error: Machine-readable error code, or the underlying error text
        message: Human-readable description
        status_code: HTTP status code
        details: Additional top-level envelope fields
    """

    # nosemgrep: no-default-parameter-values (optional details for exceptions)
    def __init__(
        self,
        error: str | None,
        message: str,
        status_code: int,
        details: dict[str, object] | None = None,
    ) -> None:
        self.error = error
        self.message = message
        self.status_code = status_code
        if details is None:
            self.details: dict[str, object] = {}
        else:
            self.details = details
        super().__init__(message)


def error_envelope(
    message: str,
    error: str | None,
    details: dict[str, object],
) -> dict[str, Any]:
    """Build the failure envelope shared by both services."""
    content: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    content.update(details)
    return content


def create_exception_handlers(
    logger_factory: LoggerFactory,
) -> dict[type[Exception], ExceptionHandler]:
    """
    Create the exception handlers for a service.

    Args:
        logger_factory: Callable returning a named service logger

    Returns:
        Mapping of exception type to handler, ready for registration
    """

    async def service_error_handler(
        request: Request,
        exc: ServiceError,
    ) -> JSONResponse:
        """Handle ServiceError exceptions."""
        logger = logger_factory(__name__)
        logger.warning(
            "Service error",
            extra={
                "error_code": exc.error,
                "error_message": exc.message,
                "status_code": exc.status_code,
                "path": str(request.url.path),
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.message, exc.error, exc.details),
        )

    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report request schema violations as 400 validation failures."""
        errors = jsonable_encoder(exc.errors())
        logger = logger_factory(__name__)
        logger.info(
            "Request validation failed",
            extra={
                "path": str(request.url.path),
                "method": request.method,
                "errors": errors,
            },
        )
        return JSONResponse(
            status_code=400,
            content=error_envelope(
                "Invalid request",
                "validation_error",
                {"errors": errors},
            ),
        )

    async def http_error_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Render framework HTTP errors (unknown route, wrong method) as envelopes."""
        message = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(message, None, {}),
            headers=getattr(exc, "headers", None),
        )

    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger = logger_factory(__name__)
        logger.exception(
            "Unhandled exception",
            extra={
                "path": str(request.url.path),
                "method": request.method,
            },
        )
        exception_message = str(exc)
        error = (
            exception_message
            if exception_message
            else f"Unhandled exception of type {exc.__class__.__name__}"
        )
        return JSONResponse(
            status_code=500,
            content=error_envelope("Internal server error", error, {}),
        )

    return {
        ServiceError: cast("ExceptionHandler", service_error_handler),
        RequestValidationError: cast("ExceptionHandler", validation_error_handler),
        StarletteHTTPException: cast("ExceptionHandler", http_error_handler),
        Exception: cast("ExceptionHandler", unhandled_exception_handler),
    }


def register_exception_handlers(
    app: FastAPI,
    logger_factory: LoggerFactory,
) -> None:
    """
    Register the shared exception handlers on a FastAPI app.

    Args:
        app: FastAPI application instance
        logger_factory: Callable returning a named service logger
    """
    for exc_type, handler in create_exception_handlers(logger_factory).items():
        app.add_exception_handler(exc_type, handler)
