"""Domain services for the catalog."""

from catalog_service.services.product_catalog import SEED_PRODUCTS, ProductCatalog

__all__ = ["SEED_PRODUCTS", "ProductCatalog"]
