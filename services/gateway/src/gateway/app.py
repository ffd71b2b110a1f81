"""
FastAPI application factory.

Routers are registered in match order; the fallback router must stay last.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from service_commons.logging import create_request_logging_middleware

from gateway.config import get_settings
from gateway.core.exceptions import register_exception_handlers
from gateway.core.lifespan import lifespan
from gateway.logging import get_logger
from gateway.routers import dashboard, fallback, health, info, proxy, root


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.service.name} Service",
        description="API gateway for the user and product services",
        version=settings.service.version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(create_request_logging_middleware(get_logger))

    register_exception_handlers(app)

    app.include_router(root.router, tags=["Operations"])
    app.include_router(health.router, tags=["Operations"])
    app.include_router(info.router, tags=["Operations"])
    app.include_router(dashboard.router, tags=["Aggregation"])
    app.include_router(proxy.router, tags=["Proxy"])
    app.include_router(fallback.router)

    return app
