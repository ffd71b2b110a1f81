"""
Application lifecycle management.

Handles startup (client initialization) and shutdown (cleanup) events
for proper resource management.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from gateway.clients import ProductServiceClient, UserServiceClient
from gateway.config import get_settings
from gateway.core.fanout import join_tolerant
from gateway.core.state import init_app_state
from gateway.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Manage application lifecycle.

    Startup:
    - Initialize logging
    - Initialize application state
    - Create downstream HTTP clients
    - Log downstream health (never blocks startup)

    Shutdown:
    - Log shutdown with uptime
    - Close HTTP clients
    """
    # === STARTUP ===
    settings = get_settings()

    # Initialize logging first
    setup_logging(settings.logging.level, settings.service.name)
    logger = get_logger(__name__)

    state = init_app_state()

    logger.info(
        "Service starting",
        extra={
            "service": settings.service.name,
            "version": settings.service.version,
            "host": settings.server.host,
            "port": settings.server.port,
        },
    )

    backends = settings.backends
    logger.info(
        "Initializing backend clients",
        extra={
            "user_service_url": backends.user_service_url,
            "product_service_url": backends.product_service_url,
            "health_timeout": backends.health_timeout_seconds,
            "proxy_timeout": backends.proxy_timeout_seconds,
        },
    )

    state.user_client = UserServiceClient(
        base_url=backends.user_service_url,
        service_name="user-service",
        label="User service",
        health_timeout=backends.health_timeout_seconds,
        proxy_timeout=backends.proxy_timeout_seconds,
    )

    state.product_client = ProductServiceClient(
        base_url=backends.product_service_url,
        service_name="product-service",
        label="Product service",
        health_timeout=backends.health_timeout_seconds,
        proxy_timeout=backends.proxy_timeout_seconds,
    )

    probes = await join_tolerant(*(client.health_check() for client in state.downstreams))
    logger.info(
        "Backend health check completed",
        extra={
            client.service_name: probe.status if not isinstance(probe, BaseException) else "error"
            for client, probe in zip(state.downstreams, probes, strict=True)
        },
    )

    logger.info("Service ready to accept requests")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info(
        "Service shutting down",
        extra={
            "uptime_seconds": state.uptime_seconds,
            "uptime": state.uptime_formatted,
        },
    )

    for client in state.downstreams:
        await client.close()

    logger.info("Service shutdown complete")
