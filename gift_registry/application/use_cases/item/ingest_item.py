# Standard library imports
import secrets
import logging
from typing import List, TYPE_CHECKING

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.models.item import Item
from ....domain.exceptions import ProviderError
from ....domain.services.tag_extractor import TagExtractor
from ....utils.datetime_utils import utc_now
from ...dto.item_dto import IngestItemResponse, PhotoUpload
from ...mappers import item_to_response, tag_set_to_response

if TYPE_CHECKING:
    from ....infrastructure.storage.photo_storage import PhotoStorage

logger = logging.getLogger(__name__)


class IngestItemUseCase:
    """Use case for creating a new item from photos with automatic tagging"""

    def __init__(
        self,
        item_repository: ItemRepository,
        tag_extractor: TagExtractor,
        photo_storage: "PhotoStorage",
    ) -> None:
        self.item_repository = item_repository
        self.tag_extractor = tag_extractor
        self.photo_storage = photo_storage

    def _generate_item_id(self) -> str:
        """
        Generate a unique item ID

        Returns:
            Unique item ID string in format ITM-XXXXXXXXXXXX
        """
        return f"ITM-{secrets.token_hex(6).upper()}"

    async def execute(self, photos: List[PhotoUpload]) -> IngestItemResponse:
        """
        Store the photos, tag the item from the first one and create it

        Args:
            photos: Uploaded photos; the first is analyzed and becomes primary

        Returns:
            IngestItemResponse with the created item and its tag set

        Raises:
            ValidationError: If no usable photos were supplied
            ProviderError: If image analysis fails (nothing is persisted)
            StoreError: If the item could not be saved (nothing is persisted;
                stored photos are discarded for any save failure)
        """
        stored_photos = self.photo_storage.save_all(photos)
        primary = stored_photos[0]

        try:
            tag_set = await self.tag_extractor.extract(primary.file_path)
        except ProviderError as e:
            logger.error(f"Image analysis failed for {primary.file_name} ({e.kind}): {e.message}")
            self.photo_storage.discard(stored_photos)
            raise

        new_item = Item(
            id=self._generate_item_id(),
            tag_set=tag_set,
            uploaded_at=utc_now(),
            photos=stored_photos,
        )

        try:
            saved_item = await self.item_repository.create(new_item)
        except Exception:
            logger.error(f"Failed to save item {new_item.id}", exc_info=True)
            self.photo_storage.discard(stored_photos)
            raise

        logger.info(
            f"Created item {saved_item.id} with {len(stored_photos)} photo(s): "
            f"category={tag_set.category} age_ranges={list(tag_set.age_ranges)}"
        )

        return IngestItemResponse(
            message="Item created successfully with AI tagging",
            item=item_to_response(saved_item),
            tag_set=tag_set_to_response(tag_set),
        )
