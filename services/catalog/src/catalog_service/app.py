"""
FastAPI application factory.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from service_commons.logging import create_request_logging_middleware

from catalog_service.config import get_settings
from catalog_service.core.exceptions import register_exception_handlers
from catalog_service.core.lifespan import lifespan
from catalog_service.logging import get_logger
from catalog_service.routers import categories, health, info, products, root


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.service.name} Service",
        description="In-memory product catalog",
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
    app.include_router(products.router, tags=["Products"])
    app.include_router(categories.router, tags=["Products"])

    return app
