from .learner_stats_service import LearnerStatsService
from .streak_tracker import StreakTracker

__all__ = ["LearnerStatsService", "StreakTracker"]
