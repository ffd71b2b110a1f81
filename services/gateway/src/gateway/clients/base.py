"""
Base HTTP client for downstream services.

Provides health probing, JSON fetching and transparent request forwarding
with path-prefix rewriting. A single attempt per call: timeouts and
connection failures are reported, never retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from gateway.core.exceptions import BackendError
from gateway.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Connection-scoped headers that must not be relayed to the downstream.
_HOP_BY_HOP_HEADERS: frozenset[str] = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
        "host",
        "content-length",
    }
)


def describe_error(error: BaseException) -> str:
    """Human-readable text for a failed downstream call."""
    message = str(error)
    if message:
        return message
    return error.__class__.__name__


class HealthProbe:
    """Outcome of a single downstream health probe."""

    def __init__(self, healthy: bool, error: str | None) -> None:
        self.healthy = healthy
        self.error = error

    @property
    def status(self) -> str:
        """Status label reported by the gateway."""
        return "healthy" if self.healthy else "unhealthy"


class BackendClient:
    """
    Base class for downstream service clients.

    Subclasses name the gateway-facing prefix they serve and the
    downstream-facing prefix it maps onto.
    """

    gateway_prefix: str = ""
    resource_prefix: str = ""

    # nosemgrep: no-default-parameter-values (optional transport for tests)
    def __init__(
        self,
        base_url: str,
        service_name: str,
        label: str,
        health_timeout: float,
        proxy_timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the backend client.

        Args:
            base_url: Base URL for the service (e.g., "http://localhost:3001")
            service_name: Identifier used in health reports and logs
            label: Human-readable name used in error messages
            health_timeout: Timeout for health probes in seconds
            proxy_timeout: Timeout for forwarded requests in seconds
            transport: Optional httpx transport (in-process apps, mocks)
        """
        self.base_url = base_url
        self.service_name = service_name
        self.label = label
        self.health_timeout = health_timeout
        self.proxy_timeout = proxy_timeout

        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(proxy_timeout),
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def health_check(self) -> HealthProbe:
        """
        Probe the downstream ``/health`` endpoint.

        Timeouts, connection errors and non-2xx answers count as unhealthy.
        """
        logger = get_logger(__name__)

        try:
            response = await self.client.get("/health", timeout=self.health_timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            error = describe_error(e)
            logger.warning(
                "Backend health check failed",
                extra={
                    "backend": self.service_name,
                    "error": error,
                    "error_type": type(e).__name__,
                },
            )
            return HealthProbe(healthy=False, error=error)

        return HealthProbe(healthy=True, error=None)

    async def fetch_json(self, path: str, timeout: float) -> Any:
        """
        GET a JSON document from the downstream.

        Args:
            path: Request path on the downstream
            timeout: Timeout in seconds for this call

        Returns:
            Decoded JSON body

        Raises:
            BackendError: On transport failure, non-2xx status or invalid JSON
        """
        logger = get_logger(__name__)

        try:
            response = await self.client.get(path, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            error = describe_error(e)
            logger.warning(
                "Backend fetch failed",
                extra={
                    "backend": self.service_name,
                    "path": path,
                    "error": error,
                    "error_type": type(e).__name__,
                },
            )
            raise BackendError(
                error=error,
                message=f"{self.label} request failed",
                details={},
            ) from e

    def rewrite_path(self, path: str) -> str:
        """Map a gateway-facing path onto the downstream resource space."""
        if path.startswith(self.gateway_prefix):
            return self.resource_prefix + path[len(self.gateway_prefix) :]
        return path

    async def forward(
        self,
        method: str,
        path: str,
        params: Iterable[tuple[str, str]],
        content: bytes,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """
        Forward a request to the downstream and return its response as is.

        Any downstream response, whatever its status, is returned for
        mirroring.

        Raises:
            BackendError: If the downstream produced no response
        """
        logger = get_logger(__name__)
        target = self.rewrite_path(path)
        forwarded_headers = {
            name: value
            for name, value in headers.items()
            if name.lower() not in _HOP_BY_HOP_HEADERS
        }

        try:
            return await self.client.request(
                method,
                target,
                params=list(params),
                content=content,
                headers=forwarded_headers,
                timeout=self.proxy_timeout,
            )
        except httpx.HTTPError as e:
            error = describe_error(e)
            logger.error(
                "Backend unavailable",
                extra={
                    "backend": self.service_name,
                    "method": method,
                    "path": target,
                    "error": error,
                    "error_type": type(e).__name__,
                },
            )
            raise BackendError(
                error=error,
                message=f"{self.label} unavailable",
                details={},
            ) from e
