"""
Health check endpoints.

``/health`` reports the gateway's own liveness; ``/health/services`` probes
every downstream and tolerates individual failures.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from service_commons.clock import iso_timestamp

from gateway.clients.base import describe_error
from gateway.config import get_settings
from gateway.core.fanout import join_tolerant
from gateway.core.state import get_app_state
from gateway.schemas import DownstreamStatus, HealthResponse, ServicesHealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report gateway liveness, independent of downstream state."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=iso_timestamp(),
        service=settings.service.health_id,
    )


@router.get(
    "/health/services",
    response_model=ServicesHealthResponse,
    responses={503: {"model": ServicesHealthResponse}},
)
async def services_health() -> JSONResponse:
    """
    Probe every downstream concurrently.

    Returns 200 when every downstream is healthy, otherwise 503. Every
    downstream is listed either way.
    """
    state = get_app_state()
    downstreams = state.downstreams

    probes = await join_tolerant(*(client.health_check() for client in downstreams))

    services: list[DownstreamStatus] = []
    for client, probe in zip(downstreams, probes, strict=True):
        if isinstance(probe, BaseException):
            status = DownstreamStatus(
                name=client.service_name,
                status="unhealthy",
                url=client.base_url,
                error=describe_error(probe),
            )
        else:
            status = DownstreamStatus(
                name=client.service_name,
                status=probe.status,
                url=client.base_url,
                error=probe.error,
            )
        services.append(status)

    all_healthy = all(service.status == "healthy" for service in services)
    body = ServicesHealthResponse(
        gateway="healthy",
        services=services,
        timestamp=iso_timestamp(),
    )
    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=body.model_dump(exclude_none=True),
    )
