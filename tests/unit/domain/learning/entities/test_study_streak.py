"""Tests for the StudyStreak entity."""

from datetime import date

import pytest

from studyledger.domain.common.exceptions import DomainError
from studyledger.domain.common.value_objects import UserId
from studyledger.domain.learning.entities.study_streak import StudyStreak

TODAY = date(2026, 3, 10)


class TestTouch:
    def test_first_study_day(self) -> None:
        streak = StudyStreak(id=UserId(1))

        assert streak.touch(TODAY) is True
        assert streak.streak == 1
        assert streak.last_study_date == TODAY

    def test_consecutive_day_increments(self) -> None:
        streak = StudyStreak(id=UserId(1), streak=4, last_study_date=date(2026, 3, 9))

        streak.touch(TODAY)

        assert streak.streak == 5
        assert streak.last_study_date == TODAY

    def test_same_day_is_noop(self) -> None:
        streak = StudyStreak(id=UserId(1), streak=4, last_study_date=TODAY)

        assert streak.touch(TODAY) is False
        assert streak.streak == 4

    def test_repeated_touch_is_idempotent(self) -> None:
        streak = StudyStreak(id=UserId(1), streak=2, last_study_date=date(2026, 3, 9))

        streak.touch(TODAY)
        streak.touch(TODAY)

        assert streak.streak == 3

    def test_gap_resets_to_one(self) -> None:
        streak = StudyStreak(id=UserId(1), streak=9, last_study_date=date(2026, 3, 7))

        streak.touch(TODAY)

        assert streak.streak == 1
        assert streak.last_study_date == TODAY

    def test_month_boundary_counts_as_consecutive(self) -> None:
        streak = StudyStreak(id=UserId(1), streak=1, last_study_date=date(2026, 2, 28))

        streak.touch(date(2026, 3, 1))

        assert streak.streak == 2

    def test_negative_streak_rejected(self) -> None:
        with pytest.raises(DomainError):
            StudyStreak(id=UserId(1), streak=-1)
