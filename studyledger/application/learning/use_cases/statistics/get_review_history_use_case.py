"""Use case for the day-bucketed review history of a learner."""

from datetime import UTC, datetime

import structlog

from studyledger.application.learning.services.learner_stats_service import (
    LearnerStatsService,
)
from studyledger.application.learning.use_cases.dtos.learner_stats_dtos import DailyReviewCount
from studyledger.domain.common.value_objects.ids import UserId
from studyledger.exceptions import ValidationError

logger = structlog.get_logger(__name__)

MAX_HISTORY_DAYS = 366


class GetReviewHistoryUseCase:
    """Use case for the day-bucketed review history of a learner."""

    def __init__(self, stats_service: LearnerStatsService, default_days: int) -> None:
        self.stats_service = stats_service
        self.default_days = default_days

    def get_history(self, user_id: int, days: int | None = None) -> list[DailyReviewCount]:
        """
        Count reviews per UTC day for the last `days` days, today included.

        Args:
            user_id: ID of the user
            days: Window size, defaults to the configured window

        Returns:
            One entry per day, oldest first

        Raises:
            ValidationError: If the window is outside 1..366 days
        """
        window = days if days is not None else self.default_days
        if not 1 <= window <= MAX_HISTORY_DAYS:
            raise ValidationError(f"days must be between 1 and {MAX_HISTORY_DAYS}")

        today = datetime.now(UTC).date()
        history = self.stats_service.review_history(UserId(user_id), window, today)
        logger.debug(
            "computed_review_history",
            user_id=user_id,
            days=window,
            reviews=sum(entry.count for entry in history),
        )
        return history
