# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.models.search import SearchContext, SearchFilter
from ....domain.services import retrieval_filter
from ...dto.item_dto import ItemListResponse
from ...mappers import item_to_response


class ListItemsUseCase:
    """Use case for the administrative item listing"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(
        self,
        availability: Optional[str] = None,
        category: Optional[str] = None,
        age_range: Optional[str] = None,
    ) -> ItemListResponse:
        """
        List items, newest first, applying only the filters that were supplied

        Args:
            availability: Optional exact availability
            category: Optional exact category
            age_range: Optional age range the item must include
        """
        criteria = retrieval_filter.build_criteria(
            SearchFilter(age_range=age_range, category=category),
            context=SearchContext.ADMINISTRATIVE,
            availability=availability,
        )
        items = await self.item_repository.find_matching(criteria)
        responses = [item_to_response(item) for item in items]
        return ItemListResponse(items=responses, count=len(responses))
