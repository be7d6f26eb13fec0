"""Tests for the StudySession and ReviewEvent entities."""

from datetime import UTC, datetime, timedelta

import pytest

from studyledger.domain.common.exceptions import DomainError, ValidationError
from studyledger.domain.common.value_objects import DeckId, ItemId, UserId
from studyledger.domain.learning.entities.review_event import ReviewEvent
from studyledger.domain.learning.entities.study_session import StudySession
from studyledger.domain.learning.services.scheduler import ReviewStatus, ScheduleState

SUBMITTED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestStudySessionClose:
    def test_start_time_derived_from_total_time(self) -> None:
        session = StudySession.close(
            user_id=UserId(1),
            submitted_at=SUBMITTED_AT,
            total_time_ms=90_000,
            review_count=3,
            correct_count=2,
            study_mode="standard",
            deck_id=DeckId("deck-n5"),
        )

        assert session.end_time == SUBMITTED_AT
        assert session.start_time == SUBMITTED_AT - timedelta(seconds=90)
        assert session.duration_seconds == 90
        assert session.id.value == 0

    def test_correct_count_cannot_exceed_review_count(self) -> None:
        with pytest.raises(DomainError):
            StudySession.close(
                user_id=UserId(1),
                submitted_at=SUBMITTED_AT,
                total_time_ms=0,
                review_count=1,
                correct_count=2,
                study_mode="standard",
            )

    def test_blank_study_mode_rejected(self) -> None:
        with pytest.raises(DomainError):
            StudySession.close(
                user_id=UserId(1),
                submitted_at=SUBMITTED_AT,
                total_time_ms=0,
                review_count=1,
                correct_count=1,
                study_mode="  ",
            )


class TestReviewEvent:
    def test_record_copies_schedules(self) -> None:
        event = ReviewEvent.record(
            user_id=UserId(1),
            item_id=ItemId("kanji-1"),
            review_date=SUBMITTED_AT,
            quality=4,
            previous=ScheduleState.initial(),
            updated=ScheduleState(interval=1, ease_factor=260, status=ReviewStatus.LEARNING),
            elapsed_ms=1500,
        )

        assert event.previous_interval == 0
        assert event.new_interval == 1
        assert event.previous_ease_factor == 250
        assert event.new_ease_factor == 260
        assert event.elapsed_ms == 1500

    def test_quality_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReviewEvent.record(
                user_id=UserId(1),
                item_id=ItemId("kanji-1"),
                review_date=SUBMITTED_AT,
                quality=6,
                previous=ScheduleState.initial(),
                updated=ScheduleState.initial(),
            )

    def test_negative_elapsed_time_rejected(self) -> None:
        with pytest.raises(DomainError):
            ReviewEvent.record(
                user_id=UserId(1),
                item_id=ItemId("kanji-1"),
                review_date=SUBMITTED_AT,
                quality=3,
                previous=ScheduleState.initial(),
                updated=ScheduleState.initial(),
                elapsed_ms=-1,
            )
