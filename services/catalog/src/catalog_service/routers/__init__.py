"""API routers for the catalog service."""

from catalog_service.routers import categories, health, info, products, root

__all__ = ["categories", "health", "info", "products", "root"]
