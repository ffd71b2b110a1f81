"""Unit tests for the in-memory product catalog."""

from __future__ import annotations

import math

import pytest

from catalog_service.schemas import Product, ProductCreate, ProductUpdate
from catalog_service.services.product_catalog import ProductCatalog


def _names(products: list[Product]) -> list[str]:
    return [p.name for p in products]


@pytest.mark.unit
class TestSeeding:
    """Tests for the seeded catalog."""

    def test_seeded_catalog_has_four_products(self) -> None:
        """Seed data holds four products and the allocator starts at 5."""
        catalog = ProductCatalog.seeded()

        assert catalog.count() == 4
        assert catalog.next_id == 5
        assert _names(catalog.search(None, None, None)) == [
            "Laptop",
            "Smartphone",
            "Coffee Mug",
            "Book",
        ]

    def test_empty_catalog_starts_at_one(self) -> None:
        """An empty catalog allocates id 1 first."""
        catalog = ProductCatalog([])

        assert catalog.next_id == 1


@pytest.mark.unit
class TestSearch:
    """Tests for ProductCatalog.search."""

    def test_category_is_case_insensitive_substring(self, catalog: ProductCatalog) -> None:
        """Category filter matches substrings regardless of case."""
        assert _names(catalog.search("electronics", None, None)) == ["Laptop", "Smartphone"]
        assert _names(catalog.search("OO", None, None)) == ["Book"]

    def test_min_price_is_inclusive(self, catalog: ProductCatalog) -> None:
        """Products priced exactly at the lower bound are included."""
        assert _names(catalog.search(None, 500.0, None)) == ["Laptop", "Smartphone"]
        assert _names(catalog.search(None, 699.99, None)) == ["Laptop", "Smartphone"]

    def test_max_price_is_inclusive(self, catalog: ProductCatalog) -> None:
        """Products priced exactly at the upper bound are included."""
        assert _names(catalog.search(None, None, 29.99)) == ["Coffee Mug", "Book"]

    def test_filters_combine_with_and(self, catalog: ProductCatalog) -> None:
        """All supplied filters must match."""
        assert _names(catalog.search("electronics", None, 700.0)) == ["Smartphone"]

    def test_nan_bound_matches_nothing(self, catalog: ProductCatalog) -> None:
        """A NaN bound excludes every product."""
        assert catalog.search(None, math.nan, None) == []
        assert catalog.search(None, None, math.nan) == []


@pytest.mark.unit
class TestInCategory:
    """Tests for ProductCatalog.in_category."""

    def test_exact_match_ignoring_case(self, catalog: ProductCatalog) -> None:
        """Whole category names match regardless of case."""
        assert _names(catalog.in_category("ELECTRONICS")) == ["Laptop", "Smartphone"]

    def test_substring_does_not_match(self, catalog: ProductCatalog) -> None:
        """Partial category names do not match."""
        assert catalog.in_category("electro") == []


@pytest.mark.unit
class TestCreate:
    """Tests for ProductCatalog.create."""

    def test_create_applies_defaults(self, catalog: ProductCatalog) -> None:
        """Omitted optional fields take their defaults."""
        product = catalog.create(ProductCreate(name="Pen", price=1.5))

        assert product == Product(
            id=5,
            name="Pen",
            description="",
            price=1.5,
            category="General",
            stock=0,
        )
        assert catalog.count() == 5

    def test_ids_are_strictly_increasing(self, catalog: ProductCatalog) -> None:
        """Every new id is greater than all previous ones."""
        ids = [catalog.create(ProductCreate(name=f"P{i}", price=1)).id for i in range(5)]

        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)
        assert min(ids) > 4

    def test_ids_are_not_reused_after_delete(self, catalog: ProductCatalog) -> None:
        """Deleting the newest product does not roll the allocator back."""
        created = catalog.create(ProductCreate(name="Pen", price=1))
        catalog.delete(created.id)

        again = catalog.create(ProductCreate(name="Pencil", price=1))

        assert again.id == created.id + 1


@pytest.mark.unit
class TestUpdate:
    """Tests for ProductCatalog.update."""

    def test_update_only_stock_preserves_other_fields(self, catalog: ProductCatalog) -> None:
        """Fields absent from the update keep their values."""
        before = catalog.get(1)
        assert before is not None

        after = catalog.update(1, ProductUpdate(stock=7))

        assert after is not None
        assert after.stock == 7
        assert after.model_dump(exclude={"stock"}) == before.model_dump(exclude={"stock"})
        assert catalog.get(1) == after

    def test_update_to_zero_stock_is_applied(self, catalog: ProductCatalog) -> None:
        """Explicit zero values are updates, not omissions."""
        after = catalog.update(1, ProductUpdate(stock=0, price=0))

        assert after is not None
        assert after.stock == 0
        assert after.price == 0

    def test_update_missing_returns_none(self, catalog: ProductCatalog) -> None:
        """Updating an unknown id leaves the catalog untouched."""
        assert catalog.update(99, ProductUpdate(name="Ghost")) is None
        assert catalog.count() == 4


@pytest.mark.unit
class TestDelete:
    """Tests for ProductCatalog.delete."""

    def test_delete_existing(self, catalog: ProductCatalog) -> None:
        """Deleting shrinks the catalog by one and the id no longer resolves."""
        assert catalog.delete(3) is True
        assert catalog.count() == 3
        assert catalog.get(3) is None

    def test_delete_missing(self, catalog: ProductCatalog) -> None:
        """Deleting an unknown id reports False."""
        assert catalog.delete(42) is False
        assert catalog.count() == 4
