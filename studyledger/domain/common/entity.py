"""
Base classes for Entities and their identifiers.

An entity keeps its identity while its state changes: a progress record is
the same record after every review.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Strongly-typed identifier.

    Each entity has its own id type so a StudySessionId can never be passed
    where a ReviewEventId is expected, even though both wrap an int.
    """

    value: int | str

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class IntegerId(EntityId):
    """Identifier assigned by the database; 0 until the row is inserted."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    @classmethod
    def generate(cls) -> Self:
        return cls(0)


@dataclass(frozen=True)
class OpaqueId(EntityId):
    """Identifier owned by an external catalog."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"{self.__class__.__name__} must be a non-empty string")


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Base class for domain objects with an `id` of type IdType."""

    id: IdType
