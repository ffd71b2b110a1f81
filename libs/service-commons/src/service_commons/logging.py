"""
Shared structured JSON logging utilities.

Format of a single line:
{
    "timestamp": "2025-01-15T10:30:00.123Z",
    "level": "INFO",
    "logger": "gateway.gateway.routers.proxy",
    "message": "Request completed",
    "extra": { ... }
}
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from service_commons.clock import iso_timestamp

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

    LoggerFactory = Callable[[str], logging.Logger]
    CallNext = Callable[[Request], Awaitable[Response]]

# Attributes every LogRecord carries; anything else came in through `extra`.
_STANDARD_ATTRS: frozenset[str] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs logs as JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        created = datetime.fromtimestamp(record.created, tz=UTC)

        log_data: dict[str, Any] = {
            "timestamp": iso_timestamp(created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS
        }
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def setup_logging(level: str, service_name: str) -> logging.Logger:
    """
    Configure structured JSON logging for a service.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for logger identification

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a valid log level
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {sorted(VALID_LOG_LEVELS)}")

    numeric_level = getattr(logging, level_upper)

    logger = logging.getLogger(service_name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_named_logger(service_name: str, logger_name: str) -> logging.Logger:
    """
    Get a named logger under a service namespace.

    Args:
        service_name: Base service logger name
        logger_name: Module or component name

    Returns:
        Logger instance
    """
    full_name = f"{service_name}.{logger_name}"
    return logging.getLogger(full_name)


def create_request_logging_middleware(
    logger_factory: LoggerFactory,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """
    Create an HTTP middleware that logs one line per handled request.

    Args:
        logger_factory: Callable returning a named service logger

    Returns:
        Middleware function for ``app.middleware("http")``
    """

    async def log_requests(request: Request, call_next: CallNext) -> Response:
        started = time.perf_counter()
        # Stays 500 when the handler raises instead of returning
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - started) * 1000
            logger_factory(__name__).info(
                "Request completed",
                extra={
                    "method": request.method,
                    "path": str(request.url.path),
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                },
            )

    return log_requests
