"""
Application common module.

Contains base classes for application layer:
- Result: Result type for use case outcomes
- UnitOfWork: Transaction boundary port
- Pagination: Offset based pagination for list queries
"""

from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination
from .result import Failure, Result, Success
from .unit_of_work import UnitOfWork

__all__ = [
    "MAX_PAGE_SIZE",
    "Failure",
    "PaginatedResult",
    "Pagination",
    "Result",
    "Success",
    "UnitOfWork",
]
