"""Tests for the ItemProgress aggregate."""

from datetime import UTC, datetime, timedelta

import pytest

from studyledger.domain.common.exceptions import InvariantViolationError
from studyledger.domain.common.value_objects import ItemId, ItemProgressId, UserId
from studyledger.domain.learning.entities.item_progress import ItemProgress
from studyledger.domain.learning.events import ItemStatusChanged
from studyledger.domain.learning.services.scheduler import ReviewStatus

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _start() -> ItemProgress:
    return ItemProgress.start(UserId(1), ItemId("kanji-1"), NOW)


class TestRecordReview:
    def test_first_review(self) -> None:
        progress = _start()

        previous = progress.record_review(4, NOW)

        assert previous.interval == 0
        assert previous.ease_factor == 250
        assert previous.status == ReviewStatus.NEW
        assert progress.interval == 1
        assert progress.ease_factor == 260
        assert progress.status == ReviewStatus.LEARNING
        assert progress.review_count == 1
        assert progress.correct_count == 1
        assert progress.incorrect_count == 0
        assert progress.last_review_quality == 4
        assert progress.due_date == NOW + timedelta(days=1)

    def test_counters_stay_consistent(self) -> None:
        progress = _start()
        for quality in [5, 2, 3, 0, 4]:
            progress.record_review(quality, NOW)

        assert progress.review_count == 5
        assert progress.correct_count == 3
        assert progress.incorrect_count == 2

    def test_due_date_follows_last_review(self) -> None:
        progress = _start()
        later = NOW + timedelta(days=3)
        progress.record_review(4, NOW)
        progress.record_review(4, later)

        assert progress.last_review_date == later
        assert progress.due_date == later + timedelta(days=progress.interval)

    def test_status_change_records_event(self) -> None:
        progress = _start()
        progress.record_review(4, NOW)

        events = progress.collect_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, ItemStatusChanged)
        assert event.previous_status == "new"
        assert event.new_status == "learning"
        assert progress.collect_events() == []

    def test_no_event_without_status_change(self) -> None:
        progress = _start()
        progress.record_review(4, NOW)
        progress.collect_events()

        progress.record_review(4, NOW)

        assert progress.pending_events == []

    def test_is_due(self) -> None:
        progress = _start()
        progress.record_review(4, NOW)

        assert not progress.is_due(NOW)
        assert progress.is_due(NOW + timedelta(days=1))


class TestInvariants:
    def _build(self, **overrides: object) -> ItemProgress:
        fields: dict[str, object] = {
            "id": ItemProgressId(1),
            "user_id": UserId(1),
            "item_id": ItemId("kanji-1"),
            "interval": 1,
            "ease_factor": 250,
            "status": ReviewStatus.LEARNING,
            "due_date": NOW,
            "review_count": 2,
            "correct_count": 1,
            "incorrect_count": 1,
            "last_review_date": NOW,
            "last_review_quality": 3,
            "created_at": NOW,
            "updated_at": NOW,
        }
        fields.update(overrides)
        return ItemProgress.create_with_id(**fields)  # type: ignore[arg-type]

    def test_valid_record(self) -> None:
        assert self._build().review_count == 2

    def test_counters_must_add_up(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._build(correct_count=2)

    def test_negative_counter_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._build(review_count=0, correct_count=1, incorrect_count=-1)

    def test_ease_factor_floor(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._build(ease_factor=129)

    def test_negative_interval_rejected(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._build(interval=-1)
