"""
In-memory product catalog.

Owns the ordered product collection and the id allocator. Every method is
synchronous, so a mutation never yields to the event loop halfway through.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from catalog_service.schemas import Product

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalog_service.schemas import ProductCreate, ProductUpdate


SEED_PRODUCTS: tuple[dict[str, Any], ...] = (
    {
        "id": 1,
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 999.99,
        "category": "Electronics",
        "stock": 50,
    },
    {
        "id": 2,
        "name": "Smartphone",
        "description": "Latest smartphone model",
        "price": 699.99,
        "category": "Electronics",
        "stock": 100,
    },
    {
        "id": 3,
        "name": "Coffee Mug",
        "description": "Ceramic coffee mug",
        "price": 12.99,
        "category": "Home",
        "stock": 200,
    },
    {
        "id": 4,
        "name": "Book",
        "description": "Programming guide",
        "price": 29.99,
        "category": "Books",
        "stock": 75,
    },
)


class ProductCatalog:
    """
    Ordered product collection with a monotonic id allocator.

    Ids are never reused: deleting the newest product does not roll the
    allocator back.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: list[Product] = list(products)
        self._next_id = max((p.id for p in self._products), default=0) + 1

    @classmethod
    def seeded(cls) -> ProductCatalog:
        """Create a catalog holding the demo seed products."""
        return cls(Product(**row) for row in SEED_PRODUCTS)

    @property
    def next_id(self) -> int:
        """Id the next created product will receive."""
        return self._next_id

    def count(self) -> int:
        """Return the number of stored products."""
        return len(self._products)

    def search(
        self,
        category: str | None,
        min_price: float | None,
        max_price: float | None,
    ) -> list[Product]:
        """
        Return products matching every supplied filter.

        Args:
            category: Case-insensitive substring of the product category
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound

        Returns:
            Matching products in insertion order
        """
        results = list(self._products)

        if category is not None:
            needle = category.lower()
            results = [p for p in results if needle in p.category.lower()]

        # NaN bounds compare false against every price and so match nothing.
        if min_price is not None:
            results = [p for p in results if p.price >= min_price]

        if max_price is not None:
            results = [p for p in results if p.price <= max_price]

        return results

    def in_category(self, category: str) -> list[Product]:
        """Return products whose category equals ``category`` ignoring case."""
        wanted = category.lower()
        return [p for p in self._products if p.category.lower() == wanted]

    def get(self, product_id: int) -> Product | None:
        """Retrieve a product. Returns None if not found."""
        index = self._index_of(product_id)
        return None if index is None else self._products[index]

    def create(self, payload: ProductCreate) -> Product:
        """Store a new product under the next free id."""
        product = Product(id=self._next_id, **payload.model_dump())
        self._next_id += 1
        self._products.append(product)
        return product

    def update(self, product_id: int, payload: ProductUpdate) -> Product | None:
        """Overwrite the supplied fields of a product. Returns None if not found."""
        index = self._index_of(product_id)
        if index is None:
            return None

        updated = self._products[index].model_copy(update=payload.changes())
        self._products[index] = updated
        return updated

    def delete(self, product_id: int) -> bool:
        """Delete a single product. Returns True if it existed."""
        index = self._index_of(product_id)
        if index is None:
            return False
        del self._products[index]
        return True

    def _index_of(self, product_id: int) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
