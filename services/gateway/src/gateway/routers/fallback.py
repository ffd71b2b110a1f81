"""
Catch-all route for paths the gateway does not serve.

Registered last so every other route wins; also answers known paths
called with an unsupported method.
"""

from __future__ import annotations

from fastapi import APIRouter

from gateway.core.exceptions import AVAILABLE_ROUTES, route_not_found
from gateway.routers.proxy import PROXY_METHODS
from gateway.schemas import ErrorResponse

__all__ = ["AVAILABLE_ROUTES", "router"]

router = APIRouter()


@router.api_route(
    "/{path:path}",
    methods=PROXY_METHODS,
    include_in_schema=False,
    responses={404: {"model": ErrorResponse}},
)
async def unmatched_route() -> None:
    """Reject the request with the list of routes that do exist."""
    raise route_not_found()
