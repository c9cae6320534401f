from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UserRole(str, Enum):
    """Access role assigned to a user."""
    USER = 'USER'
    ADMIN = 'ADMIN'


@dataclass
class User:
    """Domain model representing a registered customer."""
    id: str
    email: str
    first_name: str
    created_at: datetime
    updated_at: datetime
    last_name: str | None = None
    phone: str | None = None
    birth_date: date | None = None
    role: UserRole = UserRole.USER
    password_hash: str | None = None
