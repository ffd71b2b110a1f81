"""
Pydantic response models for the gateway service API.

Proxied responses are relayed byte for byte and have no model here.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# === Operations ===


class GatewayRoutes(BaseModel):
    """Advertised entry points."""

    users: str
    products: str
    health: str


class ServiceIdentityResponse(BaseModel):
    """Response model for GET / endpoint."""

    service: str
    version: str
    status: Literal["running"]
    port: int
    routes: GatewayRoutes


class HealthResponse(BaseModel):
    """Response model for GET /health endpoint."""

    status: Literal["healthy"]
    timestamp: str
    """ISO-8601 UTC time of the check."""

    service: str


class DownstreamStatus(BaseModel):
    """Health of one downstream service."""

    name: str
    status: Literal["healthy", "unhealthy"]
    url: str
    error: str | None = None
    """Failure description, only present when unhealthy."""


class ServicesHealthResponse(BaseModel):
    """Response model for GET /health/services endpoint."""

    gateway: Literal["healthy"]
    services: list[DownstreamStatus]
    timestamp: str


class DownstreamInfo(BaseModel):
    """Downstream configuration for /info endpoint."""

    name: str
    url: str
    gateway_prefix: str
    resource_prefix: str


class InfoResponse(BaseModel):
    """Response model for GET /info endpoint."""

    service: str
    version: str
    uptime_seconds: float
    uptime: str
    downstreams: list[DownstreamInfo]
    config: dict[str, Any]
    """Configuration with sensitive values redacted."""


# === Dashboard ===


class DashboardSummary(BaseModel):
    """Totals reported alongside the raw dashboard listings."""

    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(alias="totalUsers")
    total_products: int = Field(alias="totalProducts")
    timestamp: str


class DashboardData(BaseModel):
    """Combined downstream listings."""

    users: Any
    products: Any
    summary: DashboardSummary


class DashboardResponse(BaseModel):
    """Response model for GET /api/dashboard endpoint."""

    success: bool = True
    data: DashboardData


# === Errors ===


class ErrorResponse(BaseModel):
    """Failure envelope returned by every error path."""

    success: bool = False
    message: str
    error: str | None = None
