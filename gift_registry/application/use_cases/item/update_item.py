# Standard library imports
import logging

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.constants import ItemFields
from ....domain.exceptions import NotFoundError, ValidationError
from ....utils.datetime_utils import utc_now
from ...dto.item_dto import ItemResponse, ItemUpdateRequest
from ...mappers import item_to_response

logger = logging.getLogger(__name__)


class UpdateItemUseCase:
    """Use case for editing an item's administrative fields"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(self, item_id: str, request: ItemUpdateRequest) -> ItemResponse:
        """
        Update location, condition, notes and/or availability

        Raises:
            ValidationError: If no fields were supplied or availability is null
            NotFoundError: If item not found
        """
        fields = request.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No fields to update")
        if ItemFields.AVAILABILITY in fields and fields[ItemFields.AVAILABILITY] is None:
            raise ValidationError("Availability cannot be empty")

        fields[ItemFields.UPDATED_AT] = utc_now()

        item = await self.item_repository.update_fields(item_id, fields)
        if item is None:
            raise NotFoundError("Item", item_id)

        logger.info(f"Updated item {item_id}: {sorted(k for k in fields if k != ItemFields.UPDATED_AT)}")
        return item_to_response(item)
