# Standard library imports
import logging
from typing import Optional, List, Dict, Any, Tuple, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, TEXT, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.item_repository import ItemRepository
from ...domain.models.item import GiftRecord, Item, Photo
from ...domain.models.search import RetrievalCriteria
from ...domain.models.tag_set import TagSet
from ...domain.constants import Availability, AgeRange, Category, GiftFields, ItemFields, PhotoFields
from ...domain.exceptions import StoreError
from ...domain.services.retrieval_filter import SEARCH_FIELD_WEIGHTS
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_item_collection

logger = logging.getLogger(__name__)

TEXT_INDEX_NAME = "item_text_search"

MUTABLE_FIELDS = {
    ItemFields.LOCATION,
    ItemFields.CONDITION,
    ItemFields.NOTES,
    ItemFields.AVAILABILITY,
    ItemFields.UPDATED_AT,
}


def build_query(criteria: RetrievalCriteria) -> Dict[str, Any]:
    """
    Translate retrieval criteria into a MongoDB filter document.

    Array fields (age_ranges, themes, keywords) match by membership.
    Free-text terms are sent as quoted phrases so $text requires all of them.
    """
    query: Dict[str, Any] = {}
    if criteria.availability:
        query[ItemFields.AVAILABILITY] = criteria.availability
    if criteria.age_range:
        query[ItemFields.AGE_RANGES] = criteria.age_range
    if criteria.category:
        query[ItemFields.CATEGORY] = criteria.category
    if criteria.theme:
        query[ItemFields.THEMES] = criteria.theme
    if criteria.keyword:
        query[ItemFields.KEYWORDS] = criteria.keyword
    if criteria.text_terms:
        query["$text"] = {"$search": " ".join(f'"{term}"' for term in criteria.text_terms)}
    return query


def build_sort(criteria: RetrievalCriteria) -> List[Tuple[str, Union[int, Dict[str, str]]]]:
    """Relevance first when there is free text, then upload recency."""
    if criteria.text_terms:
        return [
            (ItemFields.TEXT_SCORE, {"$meta": "textScore"}),
            (ItemFields.UPLOADED_AT, DESCENDING),
        ]
    return [(ItemFields.UPLOADED_AT, DESCENDING)]


class MongoItemRepository(ItemRepository):
    """MongoDB implementation of ItemRepository. One document per item."""

    def __init__(self, item_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.item_collection = item_collection if item_collection is not None else get_item_collection()
        self._indexes_ready = False

    async def ensure_indexes(self) -> None:
        """Create lookup, membership and weighted text indexes (once per process)."""
        if self._indexes_ready:
            return

        try:
            await self.item_collection.create_index([(ItemFields.ID, ASCENDING)], unique=True)
            await self.item_collection.create_index([(ItemFields.CATEGORY, ASCENDING)])
            await self.item_collection.create_index([(ItemFields.AVAILABILITY, ASCENDING)])
            await self.item_collection.create_index([(ItemFields.AGE_RANGES, ASCENDING)])
            await self.item_collection.create_index([(ItemFields.THEMES, ASCENDING)])
            await self.item_collection.create_index([(ItemFields.KEYWORDS, ASCENDING)])
            await self.item_collection.create_index([(ItemFields.UPLOADED_AT, DESCENDING)])
            await self.item_collection.create_index(
                [(field_name, TEXT) for field_name, _ in SEARCH_FIELD_WEIGHTS],
                weights={field_name: weight for field_name, weight in SEARCH_FIELD_WEIGHTS},
                default_language="english",
                name=TEXT_INDEX_NAME,
            )
        except PyMongoError as e:
            raise StoreError(f"Error creating item indexes: {str(e)}", operation="ensure_indexes") from e

        self._indexes_ready = True
        logger.info("Item collection indexes ensured")

    async def create(self, item: Item) -> Item:
        """
        Insert a new item document

        Args:
            item: Item domain model with its tag set and photos

        Returns:
            The stored Item
        """
        if not item:
            raise ValueError("Item cannot be None")
        if not item.id:
            raise ValueError("Item ID is required")

        await self.ensure_indexes()
        try:
            await self.item_collection.insert_one(self._item_to_document(item))
        except PyMongoError as e:
            raise StoreError(f"Error saving item: {str(e)}", operation="create") from e
        return item

    async def find_by_id(self, item_id: str) -> Optional[Item]:
        """
        Find item by ID

        Returns:
            Item domain model if found, None otherwise
        """
        if not item_id:
            return None

        try:
            document = await self.item_collection.find_one({ItemFields.ID: item_id})
        except PyMongoError as e:
            raise StoreError(f"Error finding item by ID: {str(e)}", operation="find_by_id") from e

        if document is None:
            return None
        return self._document_to_item(document)

    async def find_matching(self, criteria: RetrievalCriteria) -> List[Item]:
        """
        List items matching criteria

        Returns:
            Items ordered by text relevance (when searching) then upload recency
        """
        await self.ensure_indexes()

        projection = None
        if criteria.text_terms:
            projection = {ItemFields.TEXT_SCORE: {"$meta": "textScore"}}

        try:
            cursor = self.item_collection.find(build_query(criteria), projection).sort(build_sort(criteria))
            items: List[Item] = []
            async for document in cursor:
                items.append(self._document_to_item(document))
            return items
        except PyMongoError as e:
            raise StoreError(f"Error listing items: {str(e)}", operation="find_matching") from e

    async def update_fields(self, item_id: str, fields: Dict[str, Any]) -> Optional[Item]:
        """
        Update administrative fields of an item

        Returns:
            Updated Item, or None if no item has this ID
        """
        illegal = set(fields) - MUTABLE_FIELDS
        if illegal:
            raise ValueError(f"Fields cannot be updated: {sorted(illegal)}")

        try:
            document = await self.item_collection.find_one_and_update(
                {ItemFields.ID: item_id},
                {"$set": dict(fields)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(f"Error updating item: {str(e)}", operation="update") from e

        if document is None:
            return None
        return self._document_to_item(document)

    async def record_gift(self, item_id: str, gift: GiftRecord) -> Optional[Item]:
        """
        Push a gift record and set availability to gifted in one atomic update

        Returns:
            Updated Item, or None if no item has this ID
        """
        try:
            document = await self.item_collection.find_one_and_update(
                {ItemFields.ID: item_id},
                {
                    "$set": {
                        ItemFields.AVAILABILITY: Availability.GIFTED,
                        ItemFields.UPDATED_AT: utc_now(),
                    },
                    "$push": {ItemFields.GIFT_HISTORY: self._gift_to_dict(gift)},
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(f"Error recording gift: {str(e)}", operation="record_gift") from e

        if document is None:
            return None
        return self._document_to_item(document)

    async def delete(self, item_id: str) -> bool:
        """Delete item by ID"""
        try:
            result = await self.item_collection.delete_one({ItemFields.ID: item_id})
        except PyMongoError as e:
            raise StoreError(f"Error deleting item: {str(e)}", operation="delete") from e
        return result.deleted_count > 0

    def _item_to_document(self, item: Item) -> Dict[str, Any]:
        """
        Convert Item domain model to MongoDB document

        Tag set fields are stored at the top level so they can be indexed.
        """
        tags = item.tag_set
        return {
            ItemFields.ID: item.id,
            ItemFields.UPLOADED_AT: item.uploaded_at,
            ItemFields.UPDATED_AT: item.updated_at,
            ItemFields.CATEGORY: tags.category,
            ItemFields.AGE_RANGES: list(tags.age_ranges),
            ItemFields.THEMES: list(tags.themes),
            ItemFields.KEYWORDS: list(tags.keywords),
            ItemFields.DESCRIPTION: tags.description,
            ItemFields.DETECTED_TEXT: tags.detected_text,
            ItemFields.DOMINANT_COLORS: list(tags.dominant_colors),
            ItemFields.CONFIDENCE_SCORES: dict(tags.confidence_scores),
            ItemFields.LOCATION: item.location,
            ItemFields.CONDITION: item.condition,
            ItemFields.NOTES: item.notes,
            ItemFields.AVAILABILITY: item.availability,
            ItemFields.PHOTOS: [self._photo_to_dict(photo) for photo in item.photos],
            ItemFields.GIFT_HISTORY: [self._gift_to_dict(gift) for gift in item.gift_history],
        }

    def _document_to_item(self, document: Dict[str, Any]) -> Item:
        """
        Convert MongoDB document to Item domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        tag_set = TagSet(
            category=document.get(ItemFields.CATEGORY) or Category.OTHER,
            age_ranges=tuple(document.get(ItemFields.AGE_RANGES) or (AgeRange.ANY_AGE,)),
            themes=tuple(document.get(ItemFields.THEMES) or ()),
            keywords=tuple(document.get(ItemFields.KEYWORDS) or ()),
            description=document.get(ItemFields.DESCRIPTION) or "",
            detected_text=document.get(ItemFields.DETECTED_TEXT) or "",
            dominant_colors=tuple(document.get(ItemFields.DOMINANT_COLORS) or ()),
            confidence_scores=dict(document.get(ItemFields.CONFIDENCE_SCORES) or {}),
        )

        item_id = document.get(ItemFields.ID)
        if item_id is None and ItemFields.MONGO_ID in document:
            item_id = str(document[ItemFields.MONGO_ID])

        return Item(
            id=item_id,
            tag_set=tag_set,
            uploaded_at=ensure_utc(document.get(ItemFields.UPLOADED_AT)) or utc_now(),
            updated_at=ensure_utc(document.get(ItemFields.UPDATED_AT)),
            photos=[self._dict_to_photo(photo) for photo in document.get(ItemFields.PHOTOS) or []],
            location=document.get(ItemFields.LOCATION),
            condition=document.get(ItemFields.CONDITION),
            notes=document.get(ItemFields.NOTES),
            availability=document.get(ItemFields.AVAILABILITY) or Availability.AVAILABLE,
            gift_history=[self._dict_to_gift(gift) for gift in document.get(ItemFields.GIFT_HISTORY) or []],
        )

    def _photo_to_dict(self, photo: Photo) -> Dict[str, Any]:
        return {
            PhotoFields.PHOTO_ID: photo.photo_id,
            PhotoFields.FILE_PATH: photo.file_path,
            PhotoFields.FILE_NAME: photo.file_name,
            PhotoFields.IS_PRIMARY: photo.is_primary,
            PhotoFields.UPLOADED_AT: photo.uploaded_at,
        }

    def _dict_to_photo(self, data: Dict[str, Any]) -> Photo:
        return Photo(
            photo_id=data.get(PhotoFields.PHOTO_ID) or "",
            file_path=data.get(PhotoFields.FILE_PATH) or "",
            file_name=data.get(PhotoFields.FILE_NAME) or "",
            is_primary=bool(data.get(PhotoFields.IS_PRIMARY)),
            uploaded_at=ensure_utc(data.get(PhotoFields.UPLOADED_AT)),
        )

    def _gift_to_dict(self, gift: GiftRecord) -> Dict[str, Any]:
        return {
            GiftFields.GIFTED_AT: gift.gifted_at,
            GiftFields.RECIPIENT_NAME: gift.recipient_name,
            GiftFields.RECIPIENT_AGE: gift.recipient_age,
            GiftFields.OCCASION: gift.occasion,
            GiftFields.NOTES: gift.notes,
        }

    def _dict_to_gift(self, data: Dict[str, Any]) -> GiftRecord:
        return GiftRecord(
            gifted_at=ensure_utc(data.get(GiftFields.GIFTED_AT)) or utc_now(),
            recipient_name=data.get(GiftFields.RECIPIENT_NAME),
            recipient_age=data.get(GiftFields.RECIPIENT_AGE),
            occasion=data.get(GiftFields.OCCASION),
            notes=data.get(GiftFields.NOTES),
        )
