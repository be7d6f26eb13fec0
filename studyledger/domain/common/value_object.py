"""
Base class for Value Objects.

Value objects are frozen dataclasses compared by their attributes, e.g.
ScheduleState(interval, ease_factor, status) or the typed ids.
"""


class ValueObject:
    """Marker base for frozen dataclasses compared by value."""

    def to_primitive(self) -> object:
        """Single-value objects collapse to their value, others to a dict."""
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
