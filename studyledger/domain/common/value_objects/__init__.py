"""Common value objects shared across all domain modules."""

from .ids import (
    DeckId,
    ItemId,
    ItemProgressId,
    ReviewEventId,
    StudySessionId,
    UserId,
)

__all__ = [
    "DeckId",
    "ItemId",
    "ItemProgressId",
    "ReviewEventId",
    "StudySessionId",
    "UserId",
]
