# Standard library imports
import logging

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.models.item import GiftRecord
from ....domain.exceptions import NotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.item_dto import GiftRecordRequest, ItemResponse
from ...mappers import item_to_response

logger = logging.getLogger(__name__)


class RecordGiftUseCase:
    """Use case for recording that an item was given away"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(self, item_id: str, request: GiftRecordRequest) -> ItemResponse:
        """
        Append a gift record and mark the item as gifted

        Raises:
            NotFoundError: If item not found
        """
        gift = GiftRecord(
            gifted_at=utc_now(),
            recipient_name=request.recipient_name,
            recipient_age=request.recipient_age,
            occasion=request.occasion,
            notes=request.notes,
        )

        item = await self.item_repository.record_gift(item_id, gift)
        if item is None:
            raise NotFoundError("Item", item_id)

        logger.info(f"Recorded gift for item {item_id}")
        return item_to_response(item)
