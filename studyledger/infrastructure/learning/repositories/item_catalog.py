"""Read-only adapter over the catalog tables."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from studyledger.domain.common.value_objects.ids import DeckId, ItemId
from studyledger.infrastructure.common.storage import storage_errors
from studyledger.models import Deck as DeckORM
from studyledger.models import Item as ItemORM


class ItemCatalog:
    """Existence checks for catalog items and decks."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def item_exists(self, item_id: ItemId) -> bool:
        stmt = select(ItemORM.id).where(ItemORM.id == item_id.value)
        with storage_errors("catalog lookup"):
            return self.db.execute(stmt).scalar_one_or_none() is not None

    def deck_exists(self, deck_id: DeckId) -> bool:
        stmt = select(DeckORM.id).where(DeckORM.id == deck_id.value)
        with storage_errors("deck lookup"):
            return self.db.execute(stmt).scalar_one_or_none() is not None
