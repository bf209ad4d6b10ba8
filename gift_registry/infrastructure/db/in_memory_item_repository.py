# Standard library imports
import asyncio
import copy
import logging
from typing import Any, Dict, List, Optional

# Local application imports
from ...domain.repositories.item_repository import ItemRepository
from ...domain.models.item import GiftRecord, Item
from ...domain.models.search import RetrievalCriteria
from ...domain.constants import Availability
from ...domain.services import retrieval_filter
from ...utils.datetime_utils import utc_now
from .mongo_item_repository import MUTABLE_FIELDS

logger = logging.getLogger(__name__)


class InMemoryItemRepository(ItemRepository):
    """
    Process-local ItemRepository used for development and tests.

    Items are copied on the way in and out so callers never share state with
    the store. Each write runs under one lock, so an item is either fully
    stored or not stored at all.
    """

    def __init__(self) -> None:
        self._items: Dict[str, Item] = {}
        self._lock = asyncio.Lock()

    async def create(self, item: Item) -> Item:
        if not item:
            raise ValueError("Item cannot be None")
        if not item.id:
            raise ValueError("Item ID is required")

        async with self._lock:
            if item.id in self._items:
                raise ValueError(f"Item '{item.id}' already exists")
            self._items[item.id] = copy.deepcopy(item)
        logger.debug(f"Stored item {item.id} in memory")
        return item

    async def find_by_id(self, item_id: str) -> Optional[Item]:
        item = self._items.get(item_id)
        return copy.deepcopy(item) if item else None

    async def find_matching(self, criteria: RetrievalCriteria) -> List[Item]:
        return [copy.deepcopy(item) for item in retrieval_filter.apply(self._items.values(), criteria)]

    async def update_fields(self, item_id: str, fields: Dict[str, Any]) -> Optional[Item]:
        illegal = set(fields) - MUTABLE_FIELDS
        if illegal:
            raise ValueError(f"Fields cannot be updated: {sorted(illegal)}")

        async with self._lock:
            current = self._items.get(item_id)
            if current is None:
                return None
            updated = copy.deepcopy(current)
            for name, value in fields.items():
                setattr(updated, name, value)
            # Re-run model validation before committing
            updated.__post_init__()
            self._items[item_id] = updated
            return copy.deepcopy(updated)

    async def record_gift(self, item_id: str, gift: GiftRecord) -> Optional[Item]:
        async with self._lock:
            current = self._items.get(item_id)
            if current is None:
                return None
            updated = copy.deepcopy(current)
            updated.gift_history.append(copy.deepcopy(gift))
            updated.availability = Availability.GIFTED
            updated.updated_at = utc_now()
            self._items[item_id] = updated
            return copy.deepcopy(updated)

    async def delete(self, item_id: str) -> bool:
        async with self._lock:
            return self._items.pop(item_id, None) is not None
