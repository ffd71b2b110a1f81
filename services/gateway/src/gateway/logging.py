"""
Structured JSON logging for production observability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.logging import get_named_logger, setup_logging

if TYPE_CHECKING:
    import logging

__all__ = [
    "get_logger",
    "setup_logging",
]


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the gateway namespace.

    Args:
        name: Logger name (usually __name__ of calling module)

    Returns:
        Logger instance
    """
    # Import lazily to avoid import-time settings evaluation.
    # nosemgrep: config.semgrep.python.no-noqa-for-typing
    from gateway.config import get_settings  # noqa: PLC0415

    return get_named_logger(get_settings().service.name, name)
