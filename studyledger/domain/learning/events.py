"""Learning context domain events."""

from dataclasses import dataclass

from studyledger.domain.common.domain_event import DomainEvent
from studyledger.domain.common.value_objects import ItemId, UserId


@dataclass(frozen=True)
class ItemStatusChanged(DomainEvent):
    """An item moved between learning stages for a user."""

    user_id: UserId
    item_id: ItemId
    previous_status: str
    new_status: str
