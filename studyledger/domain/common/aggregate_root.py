"""Base class for Aggregate Roots."""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Consistency boundary that records domain events as it changes.

    The repository that persists the aggregate hands the events back to the
    application layer through collect_events().
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return and clear the recorded events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        return self._events.copy()
