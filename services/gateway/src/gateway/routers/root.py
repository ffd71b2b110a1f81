"""
Gateway identity endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from gateway.clients import ProductServiceClient, UserServiceClient
from gateway.config import get_settings
from gateway.schemas import GatewayRoutes, ServiceIdentityResponse

router = APIRouter()


@router.get("/", response_model=ServiceIdentityResponse)
async def identity() -> ServiceIdentityResponse:
    """Report gateway metadata and the routes it serves."""
    settings = get_settings()
    return ServiceIdentityResponse(
        service=settings.service.display_name,
        version=settings.service.version,
        status="running",
        port=settings.server.port,
        routes=GatewayRoutes(
            users=UserServiceClient.gateway_prefix,
            products=ProductServiceClient.gateway_prefix,
            health="/health",
        ),
    )
