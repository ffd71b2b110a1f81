"""
Health check endpoint.

Provides service liveness for container orchestration
(Docker health checks, Kubernetes probes).
"""

from __future__ import annotations

from fastapi import APIRouter
from service_commons.clock import iso_timestamp

from catalog_service.config import get_settings
from catalog_service.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check service health.

    Always healthy while the process is able to answer.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=iso_timestamp(),
        service=settings.service.health_id,
    )
