"""
Service identity endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from catalog_service.config import get_settings
from catalog_service.schemas import ServiceIdentityResponse

router = APIRouter()


@router.get("/", response_model=ServiceIdentityResponse)
async def identity() -> ServiceIdentityResponse:
    """Report service name, version and listen port."""
    settings = get_settings()
    return ServiceIdentityResponse(
        service=settings.service.display_name,
        version=settings.service.version,
        status="running",
        port=settings.server.port,
    )
