"""Test environment defaults.

api.security and adapter.sql.connection read their settings at import time,
so these must be in place before any test module is collected.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
