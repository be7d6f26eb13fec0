from .item_progress import ItemProgress
from .review_event import ReviewEvent
from .study_session import StudySession
from .study_streak import StudyStreak

__all__ = ["ItemProgress", "ReviewEvent", "StudySession", "StudyStreak"]
