"""Building blocks shared by the identity and learning domains."""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId, IntegerId, OpaqueId
from .exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "IntegerId",
    "InvariantViolationError",
    "OpaqueId",
    "ValidationError",
    "ValueObject",
]
