from dataclasses import dataclass

from ..entity import IntegerId, OpaqueId


@dataclass(frozen=True)
class UserId(IntegerId):
    pass


@dataclass(frozen=True)
class ItemId(OpaqueId):
    """Catalog item identifier, e.g. "kanji-1"."""


@dataclass(frozen=True)
class DeckId(OpaqueId):
    pass


@dataclass(frozen=True)
class ItemProgressId(IntegerId):
    pass


@dataclass(frozen=True)
class ReviewEventId(IntegerId):
    pass


@dataclass(frozen=True)
class StudySessionId(IntegerId):
    pass
