from fastapi import HTTPException
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.connection import get_session_factory
from adapter.sql.product_repository import SqlProductRepository
from adapter.sql.user_repository import SqlUserRepository
from port.product_repository import ProductRepository
from port.user_repository import UserRepository


def _get_session_factory() -> sessionmaker[Session]:
    """Get the SQLAlchemy session factory, raising 503 if unavailable."""
    session_factory = get_session_factory()
    if session_factory is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return session_factory


def get_product_repo() -> ProductRepository:
    return SqlProductRepository(_get_session_factory())


def get_user_repo() -> UserRepository:
    return SqlUserRepository(_get_session_factory())
