"""
Base class for Domain Events.

Events are recorded on an aggregate while it changes and drained once the
change is persisted. They are named in the past tense (ItemStatusChanged).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class DomainEvent:
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten the event into log-friendly primitives."""
        result: dict[str, object] = {"event_type": self.event_type}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        return result
