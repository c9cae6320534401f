"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import date, datetime, timezone

from domain.model.errors import DuplicateError
from domain.model.user import User, UserRole


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

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
        # Mirrors the unique index on users.email
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError("Email already registered")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            birth_date=birth_date,
            role=role,
            created_at=now,
            updated_at=now,
            password_hash=password_hash,
        )
        self.store[user_id] = user
        return user

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
