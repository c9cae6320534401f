"""Tests for the product catalog routes."""

import asyncio
import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from adapter.fake.product_repository import FakeProductRepository
from api.dependencies import get_product_repo
from api.main import app
from domain.model.errors import RepositoryError
from domain.model.product import Product

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)

SEEDED = [
    ('Stack Overflow Socks', '12.00'),
    ('Binary Code Beanie', '19.99'),
    ('Git Commit Cap', '22.50'),
    ('Debug Mode T-Shirt', '24.99'),
    ('404 Not Found T-Shirt', '24.99'),
    ('Null Pointer Joggers', '45.99'),
    ('Syntax Classic Hoodie', '59.99'),
    ('Semantic HTML Hoodie', '59.99'),
    ('Recursion Oversized Sweater', '65.00'),
    ('Coffee to Code Bomber Jacket', '89.00'),
]


def _slugify(name: str) -> str:
    return name.lower().replace(' ', '-')


class TestProductsRoute(unittest.TestCase):

    def setUp(self):
        self.repo = FakeProductRepository()
        for i, (name, price) in enumerate(SEEDED):
            created = BASE_TIME + timedelta(hours=i)
            self.repo.add(Product(
                id=f'prod-{i}',
                name=name,
                slug=_slugify(name),
                description=f'{name} for developers',
                price=Decimal(price),
                images=[f'https://img.example.com/{i}.jpg'],
                sizes=['M', 'L'],
                colors=['Black'],
                stock=10,
                created_at=created,
                updated_at=created,
            ))
        app.dependency_overrides[get_product_repo] = lambda: self.repo
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_price_window_sorted_by_price(self):
        response = self.client.get(
            "/products",
            params={"minPrice": 20, "maxPrice": 60, "sortBy": "price", "sortOrder": "asc", "limit": 3},
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([item['price'] for item in body['items']], [22.5, 24.99, 24.99])
        self.assertEqual(body['meta'], {"total": 6, "page": 1, "limit": 3, "totalPages": 2})

    def test_defaults(self):
        response = self.client.get("/products")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['meta']['page'], 1)
        self.assertEqual(body['meta']['limit'], 10)
        self.assertEqual(body['meta']['total'], 10)
        # Newest first
        self.assertEqual(body['items'][0]['name'], 'Coffee to Code Bomber Jacket')

    def test_camel_case_fields(self):
        item = self.client.get("/products", params={"limit": 1}).json()['items'][0]
        for key in ('id', 'name', 'slug', 'description', 'price', 'images', 'sizes',
                    'colors', 'stock', 'active', 'createdAt', 'updatedAt'):
            self.assertIn(key, item)
        self.assertNotIn('created_at', item)

    def test_search(self):
        body = self.client.get("/products", params={"search": "HOODIE"}).json()
        names = {item['name'] for item in body['items']}
        self.assertEqual(names, {'Syntax Classic Hoodie', 'Semantic HTML Hoodie'})

    def test_page_beyond_last_is_empty(self):
        response = self.client.get("/products", params={"page": 9, "limit": 5})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['items'], [])
        self.assertEqual(response.json()['meta']['totalPages'], 2)

    def test_zero_limit_rejected(self):
        response = self.client.get("/products", params={"limit": 0})
        self.assertEqual(response.status_code, 422)

    def test_limit_above_max_rejected(self):
        response = self.client.get("/products", params={"limit": 1000})
        self.assertEqual(response.status_code, 422)

    def test_unknown_sort_field_rejected(self):
        response = self.client.get("/products", params={"sortBy": "stock"})
        self.assertEqual(response.status_code, 422)

    def test_negative_price_rejected(self):
        response = self.client.get("/products", params={"minPrice": -1})
        self.assertEqual(response.status_code, 422)

    def test_store_failure_returns_503(self):
        failing = MagicMock()
        failing.find_many.side_effect = RepositoryError("Failed to list products")
        failing.count.return_value = 0
        app.dependency_overrides[get_product_repo] = lambda: failing

        response = self.client.get("/products")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['detail'], "Database service unavailable")

    def test_get_by_slug(self):
        response = self.client.get("/products/git-commit-cap")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['name'], 'Git Commit Cap')
        self.assertEqual(response.json()['price'], 22.5)

    def test_get_unknown_slug_404(self):
        response = self.client.get("/products/does-not-exist")
        self.assertEqual(response.status_code, 404)

    def test_repository_not_called_on_event_loop(self):
        on_event_loop = []

        def record(method):
            def wrapper(*args, **kwargs):
                try:
                    asyncio.get_running_loop()
                    on_event_loop.append(True)
                except RuntimeError:
                    on_event_loop.append(False)
                return method(*args, **kwargs)
            return wrapper

        for name in ('find_many', 'count', 'get_by_slug'):
            setattr(self.repo, name, record(getattr(self.repo, name)))

        self.assertEqual(self.client.get("/products").status_code, 200)
        self.assertEqual(self.client.get("/products/git-commit-cap").status_code, 200)

        self.assertEqual(len(on_event_loop), 3)
        self.assertNotIn(True, on_event_loop)


if __name__ == '__main__':
    unittest.main()
