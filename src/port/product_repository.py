"""Port definition for ProductRepository."""

from typing import Protocol

from domain.model.product import Product, ProductQuery


class ProductRepository(Protocol):
    def find_many(self, query: ProductQuery) -> list[Product]: ...

    def count(self, query: ProductQuery) -> int: ...

    def get_by_slug(self, slug: str) -> Product | None: ...

    def upsert_by_slug(self, product: Product) -> Product: ...
