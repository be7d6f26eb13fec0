"""
Spaced repetition scheduler.

Pure domain logic with no infrastructure dependencies. All arithmetic on
intervals and ease factors is integer: ease factors are fixed-point values
scaled by 100 (250 == 2.50), so repeated reviews never accumulate
floating-point drift.
"""

from dataclasses import dataclass
from enum import StrEnum

from studyledger.domain.common.exceptions import ValidationError
from studyledger.domain.common.value_object import ValueObject

MIN_QUALITY = 0
MAX_QUALITY = 5
# Lowest quality that counts as a correct recall
PASSING_QUALITY = 3
# Lowest quality that counts as a full recall for ease growth
FULL_RECALL_QUALITY = 4

DEFAULT_EASE_FACTOR = 250
MIN_EASE_FACTOR = 130
FAILURE_EASE_PENALTY = 20
# Ease factor at which an interval is carried over unchanged
INTERVAL_GROWTH_BASE = 250

REVIEWING_INTERVAL_DAYS = 21
BURNED_INTERVAL_DAYS = 365


class ReviewStatus(StrEnum):
    """Learning stage of a (user, item) pair."""

    NEW = "new"
    LEARNING = "learning"
    REVIEWING = "reviewing"
    BURNED = "burned"


@dataclass(frozen=True)
class ScheduleState(ValueObject):
    """
    Scheduling state of a single (user, item) pair.

    Attributes:
        interval: Days until the next review (0 before the first success)
        ease_factor: Fixed-point ease multiplier, x100
        status: Learning stage
    """

    interval: int
    ease_factor: int
    status: ReviewStatus

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValidationError("Interval cannot be negative", field="interval", value=self.interval)
        if self.ease_factor < MIN_EASE_FACTOR:
            raise ValidationError(
                f"Ease factor cannot be below {MIN_EASE_FACTOR}",
                field="ease_factor",
                value=self.ease_factor,
            )

    @classmethod
    def initial(cls) -> "ScheduleState":
        """State of an item that has never been reviewed."""
        return cls(interval=0, ease_factor=DEFAULT_EASE_FACTOR, status=ReviewStatus.NEW)


def validate_quality(quality: int) -> int:
    """
    Ensure a review quality is an integer on the 0-5 scale.

    Raises:
        ValidationError: If quality is not an int in range
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise ValidationError("Quality must be an integer", field="quality", value=quality)
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise ValidationError(
            f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}",
            field="quality",
            value=quality,
        )
    return quality


def is_correct(quality: int) -> bool:
    """Whether a quality score counts as a correct recall."""
    return quality >= PASSING_QUALITY


def ease_delta(quality: int) -> int:
    """
    Ease factor change for a successful recall, in x100 units.

    delta = 10 - s * (8 + 2s), where s is the recall shortfall. Qualities 4
    and 5 are full recalls (s = 0, +10); quality 3 has s = 2 (-14).
    """
    shortfall = 0 if quality >= FULL_RECALL_QUALITY else MAX_QUALITY - quality
    return 10 - shortfall * (8 + shortfall * 2)


def _grow_interval(interval: int, ease_factor: int) -> int:
    # round(interval * ease_factor / 250), half-up, in integers
    numerator = interval * ease_factor
    return (2 * numerator + INTERVAL_GROWTH_BASE) // (2 * INTERVAL_GROWTH_BASE)


def _promote(status: ReviewStatus, interval: int) -> ReviewStatus:
    if status == ReviewStatus.NEW:
        return ReviewStatus.LEARNING
    if status == ReviewStatus.LEARNING and interval >= REVIEWING_INTERVAL_DAYS:
        return ReviewStatus.REVIEWING
    if status == ReviewStatus.REVIEWING and interval >= BURNED_INTERVAL_DAYS:
        return ReviewStatus.BURNED
    return status


def schedule(quality: int, prior: ScheduleState | None = None) -> ScheduleState:
    """
    Compute the next scheduling state from a review quality.

    Args:
        quality: Self-reported recall score (0-5)
        prior: Current state, or None if the item was never reviewed

    Returns:
        The new ScheduleState

    Raises:
        ValidationError: If quality is out of range
    """
    validate_quality(quality)
    state = prior or ScheduleState.initial()

    if not is_correct(quality):
        # Failed recall always lands back in learning
        return ScheduleState(
            interval=1,
            ease_factor=max(MIN_EASE_FACTOR, state.ease_factor - FAILURE_EASE_PENALTY),
            status=ReviewStatus.LEARNING,
        )

    ease_factor = max(MIN_EASE_FACTOR, state.ease_factor + ease_delta(quality))
    if state.interval == 0:
        interval = 1
    else:
        interval = max(1, state.interval, _grow_interval(state.interval, ease_factor))

    return ScheduleState(
        interval=interval,
        ease_factor=ease_factor,
        status=_promote(state.status, interval),
    )
