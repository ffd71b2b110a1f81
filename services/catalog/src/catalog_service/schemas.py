"""
Pydantic request/response models for the catalog service API.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CATEGORY = "General"


# === Domain Models ===


class Product(BaseModel):
    """A product record owned by the catalog."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    description: str
    price: float
    category: str
    stock: int


# === Request Models ===


class ProductCreate(BaseModel):
    """Request model for POST /products."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., gt=0, allow_inf_nan=False)
    category: str = DEFAULT_CATEGORY
    stock: int = Field(default=0, ge=0)

    @field_validator("description", mode="before")
    @classmethod
    def _null_description_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("category", mode="before")
    @classmethod
    def _blank_category_is_default(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_CATEGORY
        return value

    @field_validator("stock", mode="before")
    @classmethod
    def _null_stock_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class ProductUpdate(BaseModel):
    """
    Request model for PUT /products/{id}.

    Presence based: a field that is omitted or null keeps its stored value,
    any other value (including 0) replaces it.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    category: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, Any]:
        """Fields to overwrite on the stored product."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# === Response Models ===


class ServiceIdentityResponse(BaseModel):
    """Response model for GET / endpoint."""

    service: str
    version: str
    status: Literal["running"]
    port: int


class HealthResponse(BaseModel):
    """Response model for GET /health endpoint."""

    status: Literal["healthy"]
    timestamp: str
    """ISO-8601 UTC time of the check."""

    service: str


class ProductFilters(BaseModel):
    """Filter values echoed back by GET /products, as received."""

    model_config = ConfigDict(populate_by_name=True)

    category: str | None = None
    min_price: str | None = Field(default=None, alias="minPrice")
    max_price: str | None = Field(default=None, alias="maxPrice")


class ProductListResponse(BaseModel):
    """Response model for GET /products."""

    success: bool = True
    data: list[Product]
    count: int
    filters: ProductFilters


class ProductResponse(BaseModel):
    """Response model for GET /products/{id}."""

    success: bool = True
    data: Product


class ProductMutationResponse(BaseModel):
    """Response model for POST and PUT on products."""

    success: bool = True
    data: Product
    message: str


class MessageResponse(BaseModel):
    """Response model for operations that return no record."""

    success: bool = True
    message: str


class CategoryProductsResponse(BaseModel):
    """Response model for GET /categories/{category}/products."""

    success: bool = True
    data: list[Product]
    count: int
    category: str


class CatalogInfo(BaseModel):
    """Catalog state for /info endpoint."""

    product_count: int
    next_id: int


class InfoResponse(BaseModel):
    """Response model for GET /info endpoint."""

    service: str
    version: str
    uptime_seconds: float
    uptime: str
    catalog: CatalogInfo
    config: dict[str, Any]
    """Configuration with sensitive values redacted."""


class ErrorResponse(BaseModel):
    """Failure envelope returned by every error path."""

    success: bool = False
    message: str
    error: str | None = None
