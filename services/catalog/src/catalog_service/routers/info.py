"""
Service information endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from catalog_service.config import get_safe_config, get_settings
from catalog_service.core.state import get_app_state, get_catalog
from catalog_service.schemas import CatalogInfo, InfoResponse
from catalog_service.services.product_catalog import ProductCatalog

router = APIRouter()


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.get("/info", response_model=InfoResponse)
async def get_info(catalog: ProductCatalog = Depends(get_catalog)) -> InfoResponse:
    """Get service information, catalog size and redacted configuration."""
    settings = get_settings()
    state = get_app_state()

    return InfoResponse(
        service=settings.service.name,
        version=settings.service.version,
        uptime_seconds=state.uptime_seconds,
        uptime=state.uptime_formatted,
        catalog=CatalogInfo(
            product_count=catalog.count(),
            next_id=catalog.next_id,
        ),
        config=get_safe_config(),
    )
