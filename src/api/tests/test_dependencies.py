"""Unit tests for API dependencies — repository dependency injection.

Tests focus on the wiring logic inside get_product_repo() / get_user_repo():
- 503 when the session factory is unavailable
- SQL repositories receive the session factory
- Returned repositories expose all protocol methods
"""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from api.dependencies import get_product_repo, get_user_repo
from adapter.sql.product_repository import SqlProductRepository
from adapter.sql.user_repository import SqlUserRepository


class TestGetProductRepo(unittest.TestCase):
    """Test cases for get_product_repo() dependency injection function."""

    @patch('api.dependencies.get_session_factory')
    def test_returns_sql_repository_when_available(self, mock_get_factory):
        mock_get_factory.return_value = MagicMock()

        repo = get_product_repo()

        self.assertIsInstance(repo, SqlProductRepository)
        mock_get_factory.assert_called_once()

    @patch('api.dependencies.get_session_factory')
    def test_raises_503_when_database_unavailable(self, mock_get_factory):
        mock_get_factory.return_value = None

        with self.assertRaises(HTTPException) as context:
            get_product_repo()

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")

    @patch('api.dependencies.get_session_factory')
    def test_passes_session_factory_to_repository(self, mock_get_factory):
        factory = MagicMock()
        mock_get_factory.return_value = factory

        with patch('api.dependencies.SqlProductRepository') as mock_repo_class:
            get_product_repo()
            mock_repo_class.assert_called_once_with(factory)

    @patch('api.dependencies.get_session_factory')
    def test_returns_protocol_compatible_object(self, mock_get_factory):
        mock_get_factory.return_value = MagicMock()

        repo = get_product_repo()

        for method in ['find_many', 'count', 'get_by_slug', 'upsert_by_slug']:
            self.assertTrue(callable(getattr(repo, method, None)), f"missing {method}")


class TestGetUserRepo(unittest.TestCase):

    @patch('api.dependencies.get_session_factory')
    def test_returns_sql_repository_when_available(self, mock_get_factory):
        mock_get_factory.return_value = MagicMock()
        self.assertIsInstance(get_user_repo(), SqlUserRepository)

    @patch('api.dependencies.get_session_factory')
    def test_raises_503_when_database_unavailable(self, mock_get_factory):
        mock_get_factory.return_value = None

        with self.assertRaises(HTTPException) as context:
            get_user_repo()

        self.assertEqual(context.exception.status_code, 503)

    @patch('api.dependencies.get_session_factory')
    def test_returns_protocol_compatible_object(self, mock_get_factory):
        mock_get_factory.return_value = MagicMock()

        repo = get_user_repo()

        for method in ['create', 'get_by_email', 'get_by_id']:
            self.assertTrue(callable(getattr(repo, method, None)), f"missing {method}")


if __name__ == '__main__':
    unittest.main()
