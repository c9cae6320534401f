"""In-memory implementation of ProductRepository for testing."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.product import Product, ProductQuery, ProductSortField, SortOrder

_SORT_KEYS = {
    ProductSortField.PRICE: lambda p: p.price,
    ProductSortField.NAME: lambda p: p.name,
    ProductSortField.CREATED_AT: lambda p: p.created_at,
}


class FakeProductRepository:
    def __init__(self):
        self.store: dict[str, Product] = {}

    def add(self, product: Product) -> Product:
        """Insert a product as-is (test setup helper)."""
        self.store[product.id] = product
        return product

    # ── write operations ─────────────────────────────────────

    def upsert_by_slug(self, product: Product) -> Product:
        existing = self.get_by_slug(product.slug)
        if existing:
            return existing

        now = datetime.now(timezone.utc)
        created = replace(product, id=product.id or uuid.uuid4().hex, created_at=now, updated_at=now)
        self.store[created.id] = created
        return created

    # ── read operations ──────────────────────────────────────

    def find_many(self, query: ProductQuery) -> list[Product]:
        results = self._matching(query)
        # stable sorts: id breaks ties in the requested field
        results.sort(key=lambda p: p.id)
        results.sort(
            key=_SORT_KEYS[query.sort.field],
            reverse=query.sort.order == SortOrder.DESC,
        )
        return results[query.offset:query.offset + query.limit]

    def count(self, query: ProductQuery) -> int:
        return len(self._matching(query))

    def get_by_slug(self, slug: str) -> Product | None:
        for product in self.store.values():
            if product.slug == slug:
                return product
        return None

    def _matching(self, query: ProductQuery) -> list[Product]:
        results = list(self.store.values())

        if query.active_only:
            results = [p for p in results if p.active]
        if query.price:
            if query.price.gte is not None:
                results = [p for p in results if p.price >= query.price.gte]
            if query.price.lte is not None:
                results = [p for p in results if p.price <= query.price.lte]
        if query.search:
            needle = query.search.lower()
            results = [
                p for p in results
                if needle in p.name.lower() or needle in p.description.lower()
            ]
        return results
