"""SQLAlchemy implementation of UserRepository."""

import uuid
from datetime import date
from logging import getLogger

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import UserRecord
from domain.model.errors import DuplicateError, RepositoryError
from domain.model.user import User, UserRole

logger = getLogger(__name__)


class SqlUserRepository:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def _to_domain(self, record: UserRecord) -> User:
        """Convert ORM record to User domain model."""
        return User(
            id=record.id,
            email=record.email,
            first_name=record.first_name,
            last_name=record.last_name,
            phone=record.phone,
            birth_date=record.birth_date,
            role=UserRole(record.role),
            created_at=record.created_at,
            updated_at=record.updated_at,
            password_hash=record.password_hash,
        )

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str | None = None,
        phone: str | None = None,
        birth_date: date | None = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new user and return the User object."""
        record = UserRecord(
            id=uuid.uuid4().hex,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            birth_date=birth_date,
            role=role,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(record)
        except IntegrityError as e:
            # The unique index on email rejects a concurrent registration
            # that slipped past the service-level existence check.
            if self.get_by_email(email):
                logger.warning("User creation failed: email already exists", extra={"email": email})
                raise DuplicateError("Email already registered") from e
            logger.error("Failed to create user", extra={"email": email, "error": str(e)[:200]})
            raise RepositoryError("Failed to create user") from e
        except SQLAlchemyError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)[:200]})
            raise RepositoryError("Failed to create user") from e

        logger.info("User created", extra={"userId": record.id, "email": email})
        return self._to_domain(record)

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            with self._session_factory() as session:
                record = session.scalar(select(UserRecord).where(UserRecord.email == email))
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)[:200]})
            raise RepositoryError("Failed to get user") from e

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            with self._session_factory() as session:
                record = session.get(UserRecord, user_id)
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)[:200]})
            raise RepositoryError("Failed to get user") from e
