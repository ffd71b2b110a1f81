"""
Transparent proxy endpoints.

``/api/users*`` is forwarded to the user service as ``/users*`` and
``/api/products*`` to the product service as ``/products*``. Whatever the
downstream answers is relayed unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from gateway.core.state import get_app_state
from gateway.schemas import ErrorResponse

if TYPE_CHECKING:
    from gateway.clients import BackendClient

router = APIRouter()

PROXY_METHODS: list[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE"]


async def _relay(client: BackendClient, request: Request) -> Response:
    """Forward the request and mirror the downstream status and body."""
    upstream = await client.forward(
        method=request.method,
        path=request.url.path,
        params=request.query_params.multi_items(),
        content=await request.body(),
        headers=request.headers,
    )
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )


@router.api_route(
    "/api/users",
    methods=PROXY_METHODS,
    responses={503: {"model": ErrorResponse}},
)
@router.api_route(
    "/api/users/{path:path}",
    methods=PROXY_METHODS,
    responses={503: {"model": ErrorResponse}},
)
async def proxy_users(request: Request) -> Response:
    """Proxy to the user service."""
    return await _relay(get_app_state().user_client, request)


@router.api_route(
    "/api/products",
    methods=PROXY_METHODS,
    responses={503: {"model": ErrorResponse}},
)
@router.api_route(
    "/api/products/{path:path}",
    methods=PROXY_METHODS,
    responses={503: {"model": ErrorResponse}},
)
async def proxy_products(request: Request) -> Response:
    """Proxy to the product service."""
    return await _relay(get_app_state().product_client, request)
