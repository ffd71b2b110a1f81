"""
Product endpoints.

CRUD and filtered listing over the in-memory catalog.
"""

from __future__ import annotations

import math
import re
from typing import Any

from fastapi import APIRouter, Depends, Query

from catalog_service.core.exceptions import not_found
from catalog_service.core.state import get_catalog
from catalog_service.logging import get_logger
from catalog_service.schemas import (
    ErrorResponse,
    MessageResponse,
    ProductCreate,
    ProductFilters,
    ProductListResponse,
    ProductMutationResponse,
    ProductResponse,
    ProductUpdate,
)
from catalog_service.services.product_catalog import ProductCatalog

router = APIRouter()

NOT_FOUND_RESPONSES: dict[int | str, dict[str, Any]] = {404: {"model": ErrorResponse}}

# Plain ASCII decimal digits only; int() would also take "1_0", " 1", "+1" or "١".
_PRODUCT_ID_PATTERN = re.compile(r"[0-9]+")


def _parse_product_id(raw_id: str) -> int:
    """Parse a path id. Anything but plain decimal digits cannot match a product."""
    if _PRODUCT_ID_PATTERN.fullmatch(raw_id) is None:
        raise not_found()
    return int(raw_id)


def _parse_price_bound(raw_value: str | None) -> float | None:
    """
    Parse a price filter.

    Empty values mean "no filter"; unparseable values become NaN and
    therefore exclude every product.
    """
    if not raw_value:
        return None
    try:
        return float(raw_value)
    except ValueError:
        return math.nan


# nosemgrep: no-default-parameter-values (optional API query parameters)
@router.get("/products", response_model=ProductListResponse)
async def list_products(
    category: str | None = Query(default=None),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    catalog: ProductCatalog = Depends(get_catalog),
) -> ProductListResponse:
    """List products matching every supplied filter."""
    products = catalog.search(
        category=category or None,
        min_price=_parse_price_bound(min_price),
        max_price=_parse_price_bound(max_price),
    )
    return ProductListResponse(
        data=products,
        count=len(products),
        filters=ProductFilters(category=category, min_price=min_price, max_price=max_price),
    )


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def get_product(
    product_id: str,
    catalog: ProductCatalog = Depends(get_catalog),
) -> ProductResponse:
    """Retrieve a single product."""
    product = catalog.get(_parse_product_id(product_id))
    if product is None:
        raise not_found()
    return ProductResponse(data=product)


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.post("/products", response_model=ProductMutationResponse, status_code=201)
async def create_product(
    payload: ProductCreate,
    catalog: ProductCatalog = Depends(get_catalog),
) -> ProductMutationResponse:
    """Create a product under the next sequential id."""
    product = catalog.create(payload)
    get_logger(__name__).info(
        "Product created",
        extra={"product_id": product.id, "product_count": catalog.count()},
    )
    return ProductMutationResponse(data=product, message="Product created successfully")


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.put(
    "/products/{product_id}",
    response_model=ProductMutationResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    catalog: ProductCatalog = Depends(get_catalog),
) -> ProductMutationResponse:
    """Overwrite the supplied fields of a product."""
    product = catalog.update(_parse_product_id(product_id), payload)
    if product is None:
        raise not_found()
    get_logger(__name__).info(
        "Product updated",
        extra={"product_id": product.id, "fields": sorted(payload.changes())},
    )
    return ProductMutationResponse(data=product, message="Product updated successfully")


# nosemgrep: no-default-parameter-values (FastAPI dependency injection)
@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def delete_product(
    product_id: str,
    catalog: ProductCatalog = Depends(get_catalog),
) -> MessageResponse:
    """Delete a single product."""
    parsed_id = _parse_product_id(product_id)
    if not catalog.delete(parsed_id):
        raise not_found()
    get_logger(__name__).info(
        "Product deleted",
        extra={"product_id": parsed_id, "product_count": catalog.count()},
    )
    return MessageResponse(message="Product deleted successfully")
