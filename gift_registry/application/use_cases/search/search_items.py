# Standard library imports
import logging

# Local application imports
from ....domain.repositories.item_repository import ItemRepository
from ....domain.models.search import SearchContext
from ....domain.exceptions import ValidationError
from ....domain.services import retrieval_filter
from ....domain.services.query_parser import parse_query
from ...dto.search_dto import SearchRequest, SearchResponse
from ...mappers import filter_to_response, item_to_response

logger = logging.getLogger(__name__)


class SearchItemsUseCase:
    """Use case for conversational search over available items"""

    def __init__(self, item_repository: ItemRepository) -> None:
        self.item_repository = item_repository

    async def execute(self, request: SearchRequest) -> SearchResponse:
        """
        Parse the query into filters and retrieve matching available items

        Args:
            request: Search request with the free-text query

        Returns:
            SearchResponse with the parsed filters and ordered items

        Raises:
            ValidationError: If the query is empty
        """
        query = (request.query or "").strip()
        if not query:
            raise ValidationError("Query is required")

        search_filter = parse_query(query)
        criteria = retrieval_filter.build_criteria(search_filter, context=SearchContext.CONVERSATIONAL)
        items = await self.item_repository.find_matching(criteria)

        if search_filter.is_empty():
            logger.debug(f"Search '{query}' has no structured filters; using free text only")

        logger.info(
            f"Search '{query}' -> age_range={search_filter.age_range} category={search_filter.category} "
            f"theme={search_filter.theme} terms={list(criteria.text_terms)}: {len(items)} item(s)"
        )

        responses = [item_to_response(item) for item in items]
        return SearchResponse(
            query=query,
            filters=filter_to_response(search_filter),
            items=responses,
            count=len(responses),
        )
