# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.exceptions import NotFoundError
from ...dto.item_dto import ItemResponse
from ...mappers import item_to_response


class GetItemUseCase:
    """Use case for getting an item by ID"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(self, item_id: str) -> ItemResponse:
        """
        Get an item by ID

        Raises:
            NotFoundError: If item not found
        """
        item = await self.item_repository.find_by_id(item_id)
        if item is None:
            raise NotFoundError("Item", item_id)
        return item_to_response(item)
