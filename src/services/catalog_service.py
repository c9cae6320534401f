"""Catalog service — product listing business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that exception handlers map to HTTP status codes.
"""

import asyncio
import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any

from domain.model.errors import NotFoundError, ValidationError
from domain.model.product import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PageMeta,
    PriceRange,
    Product,
    ProductFilter,
    ProductPage,
    ProductQuery,
    ProductSortField,
    SortOrder,
    SortSpec,
)
from port.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _to_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer")


def _to_decimal(name: str, value: Any) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number")
    if not price.is_finite():
        raise ValidationError(f"{name} must be a number")
    return price


def normalize_filter(
    min_price: Any = None,
    max_price: Any = None,
    search: str | None = None,
    page: Any = None,
    limit: Any = None,
    sort_by: Any = None,
    sort_order: Any = None,
) -> ProductFilter:
    """Fill defaults and coerce raw listing parameters into a ProductFilter.

    Raises:
        ValidationError: page < 1, limit <= 0, non-numeric values,
            or an unknown sort field/direction
    """
    page = DEFAULT_PAGE if page is None else _to_int("page", page)
    limit = DEFAULT_LIMIT if limit is None else _to_int("limit", limit)
    if page < 1:
        raise ValidationError("page must be at least 1")
    if limit <= 0:
        raise ValidationError("limit must be greater than 0")

    try:
        sort_field = ProductSortField(sort_by) if sort_by is not None else ProductSortField.CREATED_AT
        direction = SortOrder(sort_order) if sort_order is not None else SortOrder.DESC
    except ValueError as e:
        raise ValidationError(str(e))

    if search is not None and not search.strip():
        search = None

    return ProductFilter(
        min_price=_to_decimal("minPrice", min_price),
        max_price=_to_decimal("maxPrice", max_price),
        search=search,
        page=page,
        limit=limit,
        sort_by=sort_field,
        sort_order=direction,
    )


def build_query(product_filter: ProductFilter) -> ProductQuery:
    """Translate a normalized filter into a ProductQuery.

    Only constraints that were supplied are added; listing is always
    restricted to active products.
    """
    price = None
    if product_filter.min_price is not None or product_filter.max_price is not None:
        price = PriceRange(gte=product_filter.min_price, lte=product_filter.max_price)

    return ProductQuery(
        active_only=True,
        price=price,
        search=product_filter.search,
        sort=SortSpec(field=product_filter.sort_by, order=product_filter.sort_order),
        offset=(product_filter.page - 1) * product_filter.limit,
        limit=product_filter.limit,
    )


async def list_products(repo: ProductRepository, product_filter: ProductFilter) -> ProductPage:
    """Return one page of active products matching the filter.

    The page query and the count query run concurrently in worker threads;
    both use the same ProductQuery so their predicates cannot drift apart.

    Raises:
        RepositoryError: the store failed (propagated unchanged)
    """
    query = build_query(product_filter)

    items, total = await asyncio.gather(
        asyncio.to_thread(repo.find_many, query),
        asyncio.to_thread(repo.count, query),
    )

    meta = PageMeta(
        total=total,
        page=product_filter.page,
        limit=product_filter.limit,
        total_pages=math.ceil(total / product_filter.limit),
    )
    logger.info("Listed products", extra={"count": len(items), "total": total, "page": meta.page})
    return ProductPage(items=items, meta=meta)


def get_product_by_slug(repo: ProductRepository, slug: str) -> Product:
    """Return the active product with this slug.

    Raises:
        NotFoundError: no product with this slug, or it is inactive
    """
    product = repo.get_by_slug(slug)
    if not product or not product.active:
        raise NotFoundError("Product not found")
    return product
