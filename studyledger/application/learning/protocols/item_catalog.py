"""Protocol for the read-only item catalog."""

from typing import Protocol

from studyledger.domain.common.value_objects.ids import DeckId, ItemId


class ItemCatalogProtocol(Protocol):
    """Existence checks against the catalog owned by the import pipeline."""

    def item_exists(self, item_id: ItemId) -> bool:
        """Return True if the item is present in the catalog."""
        ...

    def deck_exists(self, deck_id: DeckId) -> bool:
        """Return True if the deck is present in the catalog."""
        ...
