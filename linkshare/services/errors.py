"""Domain errors raised by the services.

Each error carries a stable ``kind`` that the API layer echoes back to
clients. HTTP status codes are chosen per endpoint, not here.
"""

from sqlalchemy.exc import OperationalError, SQLAlchemyError

# psycopg2 QueryCanceled, raised when statement_timeout expires
PG_QUERY_CANCELED = "57014"


class ServiceError(Exception):
    """Base error for credential and shared-link operations."""

    kind = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A required field is missing or blank."""

    kind = "validation_error"


class DuplicateEmailError(ServiceError):
    """An account with this email already exists."""

    kind = "duplicate_email"


class NotFoundError(ServiceError):
    """No matching account or records."""

    kind = "not_found"


class InvalidCredentialsError(ServiceError):
    """Password does not match the stored hash."""

    kind = "invalid_credentials"


class InternalError(ServiceError):
    """Database or connectivity fault."""

    kind = "internal_error"


class QueryTimeoutError(ServiceError):
    """The database gave up on a statement; nothing was committed."""

    kind = "timeout"


def require_fields(message: str, *values: str | None) -> None:
    """Raise ValidationError unless every value is a non-blank string."""
    if not all(value and value.strip() for value in values):
        raise ValidationError(message)


def from_database_error(exc: SQLAlchemyError) -> ServiceError:
    """Translate a database fault into the domain error to raise."""
    if isinstance(exc, OperationalError):
        orig = exc.orig
        # SQLite reports an expired busy timeout as "database is locked"
        if getattr(orig, "pgcode", None) == PG_QUERY_CANCELED or "database is locked" in str(orig):
            return QueryTimeoutError("Request timed out")
    return InternalError("Database error")
