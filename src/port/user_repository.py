from datetime import date
from typing import Protocol

from domain.model.user import User, UserRole


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise DuplicateError when the email is already taken
    and RepositoryError when the store itself fails.
    """
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
        """Create a new user and return it."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by exact email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...
