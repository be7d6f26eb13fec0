"""
Pagination types for queries.

Provides offset based pagination for list queries.

Example:
    page = Pagination(limit=50, offset=100)
    records = self.progress_repository.find_by_user(user_id, page.limit, page.offset)
    total = self.progress_repository.count_by_user(user_id)
    return PaginatedResult(items=records, total=total, pagination=page)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 500


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        limit: Maximum number of items to return
        offset: Number of items to skip
    """

    limit: int = 100
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("Offset cannot be negative")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.limit > MAX_PAGE_SIZE:
            raise ValueError(f"Limit cannot exceed {MAX_PAGE_SIZE}")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: Items of the requested window
        total: Total number of items across all windows
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def has_next(self) -> bool:
        """Check if there are items after this window."""
        return self.pagination.offset + len(self.items) < self.total
