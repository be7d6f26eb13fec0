"""Use case for reading the detailed statistics of a learner."""

from studyledger.application.learning.services.learner_stats_service import (
    LearnerStatsService,
)
from studyledger.application.learning.use_cases.dtos.learner_stats_dtos import (
    DetailedLearnerStats,
)
from studyledger.domain.common.value_objects.ids import UserId


class GetLearnerStatsUseCase:
    """Use case for reading the detailed statistics of a learner."""

    def __init__(self, stats_service: LearnerStatsService) -> None:
        self.stats_service = stats_service

    def get_stats(self, user_id: int) -> DetailedLearnerStats:
        """
        Get totals, accuracy, mastery and streak of a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self.stats_service.detailed(UserId(user_id))
