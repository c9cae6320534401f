"""Tests for engine/session caching in adapter.sql.connection."""

import unittest
from unittest.mock import patch

from sqlalchemy import inspect

from adapter.sql import connection
from adapter.sql.schema import ensure_schema


class TestGetEngine(unittest.TestCase):

    def setUp(self):
        connection.reset_engine()

    def tearDown(self):
        connection.reset_engine()

    @patch('adapter.sql.connection.DATABASE_URL', 'sqlite://')
    def test_engine_cached(self):
        first = connection.get_engine()
        second = connection.get_engine()
        self.assertIsNotNone(first)
        self.assertIs(first, second)

    @patch('adapter.sql.connection.DATABASE_URL', 'sqlite://')
    def test_session_factory_bound_to_engine(self):
        factory = connection.get_session_factory()
        self.assertIs(factory.kw['bind'], connection.get_engine())

    @patch('adapter.sql.connection.DATABASE_URL', 'notadialect://nowhere')
    def test_bad_url_returns_none_and_is_not_retried(self):
        self.assertIsNone(connection.get_engine())
        self.assertIsNone(connection.get_session_factory())
        with patch('adapter.sql.connection.create_engine') as mock_create:
            self.assertIsNone(connection.get_engine())
            mock_create.assert_not_called()

    def test_in_memory_sqlite_uses_shared_connection(self):
        options = connection._engine_options('sqlite://')
        self.assertIn('poolclass', options)
        self.assertFalse(options['connect_args']['check_same_thread'])

    def test_server_databases_ping_pool(self):
        options = connection._engine_options('postgresql+psycopg://u:p@db/shop')
        self.assertTrue(options['pool_pre_ping'])


class TestEnsureSchema(unittest.TestCase):

    @patch('adapter.sql.connection.DATABASE_URL', 'sqlite://')
    def test_creates_tables(self):
        connection.reset_engine()
        engine = connection.get_engine()
        try:
            self.assertTrue(ensure_schema(engine))
            self.assertEqual(set(inspect(engine).get_table_names()), {'products', 'users'})
            # Second call is a no-op
            self.assertTrue(ensure_schema(engine))
        finally:
            connection.reset_engine()


if __name__ == '__main__':
    unittest.main()
