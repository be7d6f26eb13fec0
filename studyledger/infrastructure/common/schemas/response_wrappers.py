"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, accepting either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginatedResponse(CamelModel, Generic[T]):
    """Generic pagination wrapper."""

    items: list[T]
    total: int
    offset: int
    limit: int


class HealthResponse(CamelModel):
    status: str
    version: str
