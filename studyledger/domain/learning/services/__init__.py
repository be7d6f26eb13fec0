"""Learning domain services."""

from .scheduler import (
    DEFAULT_EASE_FACTOR,
    MIN_EASE_FACTOR,
    ReviewStatus,
    ScheduleState,
    is_correct,
    schedule,
    validate_quality,
)

__all__ = [
    "DEFAULT_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "ReviewStatus",
    "ScheduleState",
    "is_correct",
    "schedule",
    "validate_quality",
]
