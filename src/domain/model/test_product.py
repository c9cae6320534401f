"""Unit tests for Product domain model — sort enums, ProductFilter defaults, ProductQuery.

Tests focus on behavior other components depend on:
- Sort enums round-trip through their string values (query params, ORM mapping)
- ProductFilter defaults match the listing contract
- ProductQuery only carries the constraints it was given
"""

import unittest
from decimal import Decimal

from domain.model.product import (
    PriceRange,
    ProductFilter,
    ProductQuery,
    ProductSortField,
    SortOrder,
    SortSpec,
)


class TestSortEnums(unittest.TestCase):
    """Tests for the string-enum behavior used when parsing query params."""

    def test_sort_field_values(self):
        self.assertEqual(ProductSortField('price'), ProductSortField.PRICE)
        self.assertEqual(ProductSortField('name'), ProductSortField.NAME)
        self.assertEqual(ProductSortField('createdAt'), ProductSortField.CREATED_AT)

    def test_sort_order_is_string_enum(self):
        self.assertEqual(SortOrder.ASC, 'asc')
        self.assertEqual(SortOrder.DESC, 'desc')

    def test_unknown_sort_field_rejected(self):
        with self.assertRaises(ValueError):
            ProductSortField('stock')


class TestProductFilterDefaults(unittest.TestCase):

    def test_defaults(self):
        """An empty filter asks for the newest ten products."""
        product_filter = ProductFilter()
        self.assertIsNone(product_filter.min_price)
        self.assertIsNone(product_filter.max_price)
        self.assertIsNone(product_filter.search)
        self.assertEqual(product_filter.page, 1)
        self.assertEqual(product_filter.limit, 10)
        self.assertEqual(product_filter.sort_by, ProductSortField.CREATED_AT)
        self.assertEqual(product_filter.sort_order, SortOrder.DESC)


class TestProductQuery(unittest.TestCase):

    def test_optional_constraints_absent_by_default(self):
        query = ProductQuery(sort=SortSpec(), offset=0, limit=10)
        self.assertTrue(query.active_only)
        self.assertIsNone(query.price)
        self.assertIsNone(query.search)

    def test_one_sided_price_range(self):
        price = PriceRange(gte=Decimal('20'))
        self.assertEqual(price.gte, Decimal('20'))
        self.assertIsNone(price.lte)

    def test_query_is_hashable_value_object(self):
        """Equal queries compare and hash equal (frozen dataclass)."""
        q1 = ProductQuery(sort=SortSpec(), offset=10, limit=10, search='hoodie')
        q2 = ProductQuery(sort=SortSpec(), offset=10, limit=10, search='hoodie')
        self.assertEqual(q1, q2)
        self.assertEqual(hash(q1), hash(q2))


if __name__ == '__main__':
    unittest.main()
