"""Business errors raised by services and rendered by the API layer."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict with existing resource"


def is_unique_violation(exc: Exception) -> bool:
    """Check whether a DB-API error is a unique or primary key violation.

    SQLite reports "UNIQUE constraint failed", PostgreSQL reports
    "duplicate key value violates unique constraint".
    """
    message = str(getattr(exc, "orig", exc))
    return "UNIQUE constraint failed" in message or "duplicate key value" in message
