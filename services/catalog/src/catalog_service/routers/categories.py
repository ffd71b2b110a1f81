"""
Category listing endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from catalog_service.core.state import get_catalog
from catalog_service.schemas import CategoryProductsResponse
from catalog_service.services.product_catalog import ProductCatalog

router = APIRouter()


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.get("/categories/{category}/products", response_model=CategoryProductsResponse)
async def list_category_products(
    category: str,
    catalog: ProductCatalog = Depends(get_catalog),
) -> CategoryProductsResponse:
    """List products whose category matches exactly, ignoring case."""
    products = catalog.in_category(category)
    return CategoryProductsResponse(
        data=products,
        count=len(products),
        category=category,
    )
