# Standard library imports
import logging

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.exceptions import NotFoundError
from ...dto.item_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeleteItemUseCase:
    """Use case for deleting an item"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(self, item_id: str) -> MessageResponse:
        """
        Delete an item by ID

        Raises:
            NotFoundError: If item not found
        """
        deleted = await self.item_repository.delete(item_id)
        if not deleted:
            raise NotFoundError("Item", item_id)

        logger.info(f"Deleted item {item_id}")
        return MessageResponse(message="Item deleted successfully")
