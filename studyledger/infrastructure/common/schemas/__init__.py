"""Common infrastructure schemas."""

from studyledger.infrastructure.common.schemas.response_wrappers import (
    CamelModel,
    HealthResponse,
    PaginatedResponse,
)

__all__ = [
    "CamelModel",
    "HealthResponse",
    "PaginatedResponse",
]
