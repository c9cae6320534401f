"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Exception handlers in the API layer map them to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class AuthenticationError(DomainError):
    """Credentials could not be verified.

    Subclasses only tell the two failure causes apart for logging;
    they share one message so callers cannot tell which emails are registered.
    """

    MESSAGE = "Invalid email or password"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class UserNotFoundError(AuthenticationError):
    """No user is registered under the given email."""


class InvalidCredentialsError(AuthenticationError):
    """Password does not match the stored hash."""


class RepositoryError(DomainError):
    """Persistence layer failed (unreachable, or an unexpected constraint error)."""
