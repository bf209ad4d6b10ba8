from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.item import GiftRecord, Item
from ..models.search import RetrievalCriteria


class ItemRepository(ABC):
    """Repository interface - defines contract for item data access"""

    @abstractmethod
    async def create(self, item: Item) -> Item:
        """Create item with its tag set and photos"""
        pass

    @abstractmethod
    async def find_by_id(self, item_id: str) -> Optional[Item]:
        """Find item by ID"""
        pass

    @abstractmethod
    async def find_matching(self, criteria: RetrievalCriteria) -> List[Item]:
        """List items matching the criteria, ordered by relevance then recency"""
        pass

    @abstractmethod
    async def update_fields(self, item_id: str, fields: Dict[str, Any]) -> Optional[Item]:
        """Update administrative fields only; returns None if the item does not exist"""
        pass

    @abstractmethod
    async def record_gift(self, item_id: str, gift: GiftRecord) -> Optional[Item]:
        """Append a gift record and mark the item gifted; returns None if not found"""
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        """Delete item; returns False if it did not exist"""
        pass
