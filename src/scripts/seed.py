"""Seed the product catalog.

Upserts the reference products by slug. Products that already exist are
left untouched, so the script is safe to run repeatedly.

Usage:
    PYTHONPATH=src python src/scripts/seed.py
    PYTHONPATH=src python src/scripts/seed.py --dry-run
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal

from dotenv import load_dotenv

# DATABASE_URL is read when the connection module is imported
load_dotenv()

from adapter.sql.connection import get_engine, get_session_factory
from adapter.sql.product_repository import SqlProductRepository
from adapter.sql.schema import ensure_schema
from domain.model.errors import RepositoryError
from domain.model.product import Product
from utils.logging import setup_structured_logging

logger = logging.getLogger("scripts.seed")

SEED_PRODUCTS = [
    {
        'name': 'Syntax Classic Hoodie',
        'slug': 'syntax-classic-hoodie',
        'description': 'A premium heavyweight hoodie featuring the SyntaxWear logo. Perfect for late-night coding sessions.',
        'price': Decimal('59.99'),
        'images': ['https://images.unsplash.com/photo-1556821840-3a63f95609a7?q=80&w=800'],
        'sizes': ['S', 'M', 'L', 'XL', 'XXL'],
        'colors': ['Black', 'Navy', 'Dark Gray'],
        'stock': 50,
    },
    {
        'name': 'Debug Mode T-Shirt',
        'slug': 'debug-mode-tee',
        'description': 'Cotton t-shirt for when you are in the zone. Minimalist design with "DEBUG" in monospace.',
        'price': Decimal('24.99'),
        'images': ['https://images.unsplash.com/photo-1521572267360-ee0c2909d518?q=80&w=800'],
        'sizes': ['S', 'M', 'L', 'XL'],
        'colors': ['White', 'Black'],
        'stock': 100,
    },
    {
        'name': 'Binary Code Beanie',
        'slug': 'binary-code-beanie',
        'description': 'Warm knit beanie with subtle binary pattern. 01010111 01100101 01100001 01110010.',
        'price': Decimal('19.99'),
        'images': ['https://images.unsplash.com/photo-1576871337632-b9aef4c17ab9?q=80&w=800'],
        'sizes': ['One Size'],
        'colors': ['Charcoal', 'Black'],
        'stock': 75,
    },
    {
        'name': 'Git Commit Cap',
        'slug': 'git-commit-cap',
        'description': "Adjustable baseball cap with \"git commit -m 'fire'\" embroidery.",
        'price': Decimal('22.50'),
        'images': ['https://images.unsplash.com/photo-1588850561407-ed78c282e1c7?q=80&w=800'],
        'sizes': ['Adjustable'],
        'colors': ['Forest Green', 'Black', 'Beige'],
        'stock': 40,
    },
    {
        'name': 'Recursion Oversized Sweater',
        'slug': 'recursion-sweater',
        'description': 'To understand recursion, you must first understand recursion. Comfy oversized fit.',
        'price': Decimal('65.00'),
        'images': ['https://images.unsplash.com/photo-1591047139829-d91aecb6caea?q=80&w=800'],
        'sizes': ['S/M', 'L/XL'],
        'colors': ['Cream', 'Sand'],
        'stock': 30,
    },
    {
        'name': 'Stack Overflow Socks',
        'slug': 'stack-overflow-socks',
        'description': 'Bamboo fiber socks that never overflow. Great gift for developers.',
        'price': Decimal('12.00'),
        'images': ['https://images.unsplash.com/photo-1582966232435-b5415f624479?q=80&w=800'],
        'sizes': ['M', 'L'],
        'colors': ['Orange', 'White'],
        'stock': 150,
    },
    {
        'name': 'Null Pointer Joggers',
        'slug': 'null-pointer-joggers',
        'description': 'Relaxed fit joggers for developers who prefer living in the console.',
        'price': Decimal('45.99'),
        'images': ['https://images.unsplash.com/photo-1552346154-21d32810aba3?q=80&w=800'],
        'sizes': ['S', 'M', 'L', 'XL'],
        'colors': ['Black', 'Heather Gray'],
        'stock': 60,
    },
    {
        'name': '404 Not Found T-Shirt',
        'slug': '404-not-found-tee',
        'description': 'Classic tee for when you just want to disappear from the grid.',
        'price': Decimal('24.99'),
        'images': ['https://images.unsplash.com/photo-1503342217505-b0a15ec3261c?q=80&w=800'],
        'sizes': ['S', 'M', 'L', 'XL', 'XXL'],
        'colors': ['Black', 'Blue'],
        'stock': 90,
    },
    {
        'name': 'Semantic HTML Hoodie',
        'slug': 'semantic-html-hoodie',
        'description': 'Wear your structure on your sleeve. A clean, minimal design for web purists.',
        'price': Decimal('59.99'),
        'images': ['https://images.unsplash.com/photo-1578932750294-f5075e85f44a?q=80&w=800'],
        'sizes': ['S', 'M', 'L', 'XL'],
        'colors': ['Slate', 'Black'],
        'stock': 45,
    },
    {
        'name': 'Coffee to Code Bomber Jacket',
        'slug': 'coffee-code-bomber',
        'description': 'Sleek bomber jacket that transitions from the coffee shop to the workstation.',
        'price': Decimal('89.00'),
        'images': ['https://images.unsplash.com/photo-1551028719-00167b16eac5?q=80&w=800'],
        'sizes': ['M', 'L', 'XL'],
        'colors': ['Olive', 'Midnight Black'],
        'stock': 25,
    },
]


def build_products() -> list[Product]:
    """Turn the seed rows into Product objects; ids are assigned on insert."""
    now = datetime.now(timezone.utc)
    return [
        Product(id='', created_at=now, updated_at=now, active=True, **row)
        for row in SEED_PRODUCTS
    ]


def seed(repo) -> int:
    """Upsert every seed product. Returns how many were processed."""
    products = build_products()
    for product in products:
        saved = repo.upsert_by_slug(product)
        logger.info("Created/updated product", extra={"productId": saved.id, "slug": saved.slug})
    return len(products)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the product catalog")
    parser.add_argument("--dry-run", action="store_true", help="List products without writing")
    args = parser.parse_args()

    setup_structured_logging()

    if args.dry_run:
        for product in build_products():
            logger.info("Would seed product", extra={"slug": product.slug, "price": str(product.price)})
        return 0

    engine = get_engine()
    session_factory = get_session_factory()
    if engine is None or session_factory is None:
        logger.error("Database unavailable, aborting seed")
        return 1
    if not ensure_schema(engine):
        return 1

    try:
        count = seed(SqlProductRepository(session_factory))
    except RepositoryError:
        logger.exception("Seeding failed")
        return 1
    logger.info("Seeding finished", extra={"count": count})
    return 0


if __name__ == "__main__":
    sys.exit(main())
