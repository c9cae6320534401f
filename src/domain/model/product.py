# domain/model/product.py

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class ProductSortField(str, Enum):
    """Fields a product listing can be ordered by."""
    PRICE = 'price'
    NAME = 'name'
    CREATED_AT = 'createdAt'


class SortOrder(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


# ── Product Domain Model ─────────────────────────────────


@dataclass
class Product:
    """Domain model representing a catalog product."""
    id: str
    name: str
    slug: str
    description: str
    price: Decimal
    created_at: datetime
    updated_at: datetime

    images: list[str] = field(default_factory=list)
    sizes: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    stock: int = 0
    active: bool = True


# ── Listing request ──────────────────────────────────────


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ProductFilter:
    """Fully-populated listing request.

    Built by catalog_service.normalize_filter(); every field already holds
    its default so the query builder never has to guess.
    """
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    search: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: ProductSortField = ProductSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


# ── Query specification ──────────────────────────────────


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds. A missing bound is unconstrained."""
    gte: Decimal | None = None
    lte: Decimal | None = None


@dataclass(frozen=True)
class SortSpec:
    field: ProductSortField = ProductSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class ProductQuery:
    """Storage-agnostic product query.

    Only the constraints that were requested are set; repositories
    translate this into their own query language.
    """
    sort: SortSpec
    offset: int
    limit: int
    active_only: bool = True
    price: PriceRange | None = None
    search: str | None = None


# ── Listing result ───────────────────────────────────────


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass
class ProductPage:
    """A page of products plus pagination metadata."""
    items: list[Product]
    meta: PageMeta
