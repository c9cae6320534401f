"""Schema management utilities.

Creates missing tables and their unique indexes at app startup.
Existing tables are left untouched.
"""

from logging import getLogger

from sqlalchemy import Engine, inspect
from sqlalchemy.exc import SQLAlchemyError

from adapter.sql.models import Base

logger = getLogger(__name__)


def ensure_schema(engine: Engine) -> bool:
    """Create all tables that do not exist yet. Called at app startup."""
    try:
        existing = set(inspect(engine).get_table_names())
        Base.metadata.create_all(engine)
        created = sorted(set(Base.metadata.tables) - existing)
        if created:
            logger.info("Created tables", extra={"tables": created})
        return True
    except SQLAlchemyError as e:
        logger.error("Failed to create schema", extra={"error": str(e)[:200]})
        return False
