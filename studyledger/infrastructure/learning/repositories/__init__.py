from .item_catalog import ItemCatalog
from .item_progress_repository import ItemProgressRepository
from .review_ledger_repository import ReviewLedgerRepository
from .study_session_repository import StudySessionRepository
from .study_streak_repository import StudyStreakRepository

__all__ = [
    "ItemCatalog",
    "ItemProgressRepository",
    "ReviewLedgerRepository",
    "StudySessionRepository",
    "StudyStreakRepository",
]
