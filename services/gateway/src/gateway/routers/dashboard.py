"""
Dashboard aggregation endpoint.

Fetches users and products in parallel; both must succeed.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from service_commons.clock import iso_timestamp

from gateway.config import get_settings
from gateway.core.exceptions import BackendError, ServiceError
from gateway.core.fanout import join_all_or_nothing
from gateway.core.state import get_app_state
from gateway.logging import get_logger
from gateway.schemas import DashboardData, DashboardResponse, DashboardSummary, ErrorResponse

router = APIRouter()


def _count_of(listing: Any) -> int:
    """Read a listing's ``count`` field, falling back to 0."""
    if not isinstance(listing, dict):
        return 0
    count = listing.get("count")  # nosemgrep: no-dict-get-with-default
    if not isinstance(count, int) or isinstance(count, bool):
        return 0
    return count


@router.get(
    "/api/dashboard",
    response_model=DashboardResponse,
    responses={503: {"model": ErrorResponse}},
)
async def dashboard() -> DashboardResponse:
    """
    Combine the user and product listings with summary totals.

    Any downstream failure fails the whole request with 503.
    """
    settings = get_settings()
    state = get_app_state()
    timeout = settings.backends.dashboard_timeout_seconds

    try:
        users, products = await join_all_or_nothing(
            state.user_client.list_users(timeout=timeout),
            state.product_client.list_products(timeout=timeout),
        )
    except BackendError as e:
        get_logger(__name__).error(
            "Dashboard aggregation failed",
            extra={"error": e.error},
        )
        raise ServiceError(
            error=e.error,
            message="Unable to fetch dashboard data",
            status_code=503,
        ) from e

    return DashboardResponse(
        data=DashboardData(
            users=users,
            products=products,
            summary=DashboardSummary(
                total_users=_count_of(users),
                total_products=_count_of(products),
                timestamp=iso_timestamp(),
            ),
        ),
    )
