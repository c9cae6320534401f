"""Auth service — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that exception handlers map to HTTP status codes.
"""

import logging
from datetime import date

import bcrypt

from domain.model.errors import (
    DuplicateError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from domain.model.user import User, UserRole
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes of the password
MAX_PASSWORD_BYTES = 72


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def _validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def _parse_birth_date(value: date | str | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError("birthDate must be an ISO date (YYYY-MM-DD)")


def register(
    repo: UserRepository,
    email: str,
    password: str,
    first_name: str,
    last_name: str | None = None,
    phone: str | None = None,
    birth_date: date | str | None = None,
) -> User:
    """Register a new user.

    Returns the created User domain object.

    Raises:
        DuplicateError: email already registered
        ValidationError: password length or birth date is invalid
        RepositoryError: the store failed
    """
    if repo.get_by_email(email):
        logger.info("Registration rejected: email already registered", extra={"email": email})
        raise DuplicateError("Email already registered")

    _validate_password(password)
    parsed_birth_date = _parse_birth_date(birth_date)
    password_hash = _hash_password(password)

    return repo.create(
        email=email,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        birth_date=parsed_birth_date,
        role=UserRole.USER,
    )


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Returns the authenticated User domain object.
    Both failure causes carry the same message; only the exception type
    and the log line tell them apart.

    Raises:
        UserNotFoundError: no user with this email
        InvalidCredentialsError: password does not match
    """
    user = repo.get_by_email(email)
    if not user:
        logger.info("Login failed: unknown email", extra={"email": email})
        raise UserNotFoundError()

    if not user.password_hash or not _verify_password(password, user.password_hash):
        logger.info("Login failed: wrong password", extra={"userId": user.id})
        raise InvalidCredentialsError()

    return user
