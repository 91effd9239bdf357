"""Custom exception hierarchy for the cardforge application."""

from fastapi import HTTPException
from starlette import status


class CardforgeError(Exception):
    """Base exception for all cardforge errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CardforgeError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(CardforgeError):
    """Validation error."""


class ServiceError(CardforgeError):
    """Service layer error."""


class ConfigurationError(CardforgeError):
    """Required configuration is missing; the component cannot be used."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=503)


class PersistenceError(CardforgeError):
    """A write to the database failed."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        """Initialize with message and the failed operation name."""
        self.operation = operation
        super().__init__(message, status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
