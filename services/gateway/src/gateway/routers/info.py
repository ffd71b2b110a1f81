"""
Service information endpoint.

Exposes gateway configuration and the downstream routing table.
"""

from __future__ import annotations

from fastapi import APIRouter

from gateway.config import get_safe_config, get_settings
from gateway.core.state import get_app_state
from gateway.schemas import DownstreamInfo, InfoResponse

router = APIRouter()


@router.get("/info", response_model=InfoResponse)
async def get_info() -> InfoResponse:
    """Get service information and configuration."""
    settings = get_settings()
    state = get_app_state()

    return InfoResponse(
        service=settings.service.name,
        version=settings.service.version,
        uptime_seconds=state.uptime_seconds,
        uptime=state.uptime_formatted,
        downstreams=[
            DownstreamInfo(
                name=client.service_name,
                url=client.base_url,
                gateway_prefix=client.gateway_prefix,
                resource_prefix=client.resource_prefix,
            )
            for client in state.downstreams
        ],
        config=get_safe_config(),
    )
