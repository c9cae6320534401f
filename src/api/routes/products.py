"""Product catalog routes.

- GET /products: List active products with price/search filters, sorting, pagination
- GET /products/{slug}: Get a single active product
"""

from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_product_repo
from api.models import PageMetaResponse, ProductListResponse, ProductResponse
from domain.model.errors import NotFoundError, ValidationError
from domain.model.product import Product, ProductSortField, SortOrder
from port.product_repository import ProductRepository
from services.catalog_service import get_product_by_slug, list_products, normalize_filter

router = APIRouter(prefix="/products", tags=["products"])

MAX_PAGE_SIZE = 100


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        slug=product.slug,
        description=product.description,
        price=float(product.price),
        images=product.images,
        sizes=product.sizes,
        colors=product.colors,
        stock=product.stock,
        active=product.active,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


@router.get("", response_model=ProductListResponse)
async def get_products(
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0, description="Inclusive lower price bound"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0, description="Inclusive upper price bound"),
    search: Optional[str] = Query(None, max_length=100, description="Case-insensitive match on name or description"),
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort_by: ProductSortField = Query(ProductSortField.CREATED_AT, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    repo: ProductRepository = Depends(get_product_repo),
):
    """List active products.

    Returns:
        Matching products for the requested page plus pagination metadata.
        A page past the last one returns an empty item list.
    """
    try:
        product_filter = normalize_filter(
            min_price=min_price,
            max_price=max_price,
            search=search,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = await list_products(repo, product_filter)

    return ProductListResponse(
        items=[_to_response(p) for p in result.items],
        meta=PageMetaResponse(
            total=result.meta.total,
            page=result.meta.page,
            limit=result.meta.limit,
            total_pages=result.meta.total_pages,
        ),
    )


@router.get("/{slug}", response_model=ProductResponse)
def get_product(slug: str, repo: ProductRepository = Depends(get_product_repo)):
    """Get a single active product by slug."""
    try:
        product = get_product_by_slug(repo, slug)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    return _to_response(product)
