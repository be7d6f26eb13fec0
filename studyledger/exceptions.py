"""Custom exception hierarchy for the studyledger application."""

from fastapi import HTTPException
from starlette import status


class StudyLedgerError(Exception):
    """Base exception for all studyledger errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(StudyLedgerError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ReferentialError(NotFoundError):
    """A review references an item that is not in the catalog."""

    def __init__(self, item_id: str) -> None:
        """Initialize with the unknown item ID."""
        self.item_id = item_id
        super().__init__(f"Item with id {item_id} not found in catalog")


class ValidationError(StudyLedgerError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status_code)


class ServiceError(StudyLedgerError):
    """Service layer error."""


class PersistenceError(ServiceError):
    """Storage-layer failure while reading or writing learning data."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=503)


class ConcurrentUpdateError(PersistenceError):
    """Another transaction created the same progress record first."""

    def __init__(self, user_id: int, item_id: str) -> None:
        """Initialize with the contended (user, item) key."""
        self.user_id = user_id
        self.item_id = item_id
        super().__init__(f"Concurrent update of progress for user {user_id}, item {item_id}")


class TotalFailureError(StudyLedgerError):
    """A well-formed batch in which no review could be committed."""

    def __init__(self, failures: list[tuple[str, StudyLedgerError]]) -> None:
        """Initialize with the (item_id, error) pairs of every failed review."""
        self.failures = failures
        super().__init__("Failed to save any review history items", status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not identify the current user",
)
