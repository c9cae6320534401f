"""SQLAlchemy implementation of ProductRepository."""

import uuid
from logging import getLogger

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import ProductRecord
from domain.model.errors import RepositoryError
from domain.model.product import Product, ProductQuery, ProductSortField, SortOrder

logger = getLogger(__name__)

_SORT_COLUMNS = {
    ProductSortField.PRICE: ProductRecord.price,
    ProductSortField.NAME: ProductRecord.name,
    ProductSortField.CREATED_AT: ProductRecord.created_at,
}

_LIKE_ESCAPE = '\\'


def _escape_like(text: str) -> str:
    """Escape LIKE wildcards so search text matches literally."""
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace('%', _LIKE_ESCAPE + '%')
        .replace('_', _LIKE_ESCAPE + '_')
    )


def build_where(query: ProductQuery) -> list[ColumnElement[bool]]:
    """Translate the constraints present on a ProductQuery into SQL predicates."""
    clauses: list[ColumnElement[bool]] = []

    if query.active_only:
        clauses.append(ProductRecord.active.is_(True))

    if query.price:
        if query.price.gte is not None:
            clauses.append(ProductRecord.price >= query.price.gte)
        if query.price.lte is not None:
            clauses.append(ProductRecord.price <= query.price.lte)

    if query.search:
        pattern = f"%{_escape_like(query.search)}%"
        clauses.append(or_(
            ProductRecord.name.ilike(pattern, escape=_LIKE_ESCAPE),
            ProductRecord.description.ilike(pattern, escape=_LIKE_ESCAPE),
        ))

    return clauses


def build_order_by(query: ProductQuery) -> tuple:
    """ORDER BY for the requested sort, with id as tiebreaker for stable paging."""
    column = _SORT_COLUMNS[query.sort.field]
    primary = column.asc() if query.sort.order == SortOrder.ASC else column.desc()
    return primary, ProductRecord.id.asc()


class SqlProductRepository:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _to_domain(self, record: ProductRecord) -> Product:
        """Convert ORM record to Product domain model."""
        return Product(
            id=record.id,
            name=record.name,
            slug=record.slug,
            description=record.description,
            price=record.price,
            images=list(record.images or []),
            sizes=list(record.sizes or []),
            colors=list(record.colors or []),
            stock=record.stock,
            active=record.active,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def find_many(self, query: ProductQuery) -> list[Product]:
        """List products matching the query, sorted and paginated."""
        stmt = (
            select(ProductRecord)
            .where(*build_where(query))
            .order_by(*build_order_by(query))
            .offset(query.offset)
            .limit(query.limit)
        )
        try:
            with self._session_factory() as session:
                records = session.scalars(stmt).all()
                return [self._to_domain(r) for r in records]
        except SQLAlchemyError as e:
            logger.error("Failed to list products", extra={"error": str(e)[:200]})
            raise RepositoryError("Failed to list products") from e

    def count(self, query: ProductQuery) -> int:
        """Count products matching the query, ignoring pagination."""
        stmt = select(func.count()).select_from(ProductRecord).where(*build_where(query))
        try:
            with self._session_factory() as session:
                return session.scalar(stmt) or 0
        except SQLAlchemyError as e:
            logger.error("Failed to count products", extra={"error": str(e)[:200]})
            raise RepositoryError("Failed to count products") from e

    def get_by_slug(self, slug: str) -> Product | None:
        """Find a product by slug. Return Product or None if not found."""
        try:
            with self._session_factory() as session:
                record = session.scalar(select(ProductRecord).where(ProductRecord.slug == slug))
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error("Failed to get product by slug", extra={"slug": slug, "error": str(e)[:200]})
            raise RepositoryError("Failed to get product") from e

    def upsert_by_slug(self, product: Product) -> Product:
        """Insert the product unless its slug exists; existing rows are returned unchanged."""
        existing = self.get_by_slug(product.slug)
        if existing:
            return existing

        record = ProductRecord(
            id=product.id or uuid.uuid4().hex,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            images=list(product.images),
            sizes=list(product.sizes),
            colors=list(product.colors),
            stock=product.stock,
            active=product.active,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(record)
            logger.info("Product created", extra={"productId": record.id, "slug": record.slug})
            return self._to_domain(record)
        except IntegrityError as e:
            # Another writer inserted the same slug between lookup and insert
            winner = self.get_by_slug(product.slug)
            if winner:
                return winner
            logger.error("Failed to create product", extra={"slug": product.slug, "error": str(e)[:200]})
            raise RepositoryError("Failed to create product") from e
        except SQLAlchemyError as e:
            logger.error("Failed to create product", extra={"slug": product.slug, "error": str(e)[:200]})
            raise RepositoryError("Failed to create product") from e
