"""API routers for the gateway service."""

from gateway.routers import dashboard, fallback, health, info, proxy, root

__all__ = ["dashboard", "fallback", "health", "info", "proxy", "root"]
