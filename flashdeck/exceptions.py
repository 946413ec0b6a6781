"""Application-level exception hierarchy for flashdeck."""

from fastapi import HTTPException
from starlette import status


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors that map to an HTTP status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(FlashdeckError):
    """Validation error."""


class ServiceError(FlashdeckError):
    """Service layer error."""


class PersistenceError(ServiceError):
    """
    The store failed to read or write.

    Nothing of the operation was persisted, so the caller may retry.
    """

    def __init__(self, message: str = "Storage temporarily unavailable") -> None:
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
