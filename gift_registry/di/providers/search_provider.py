from typing import TYPE_CHECKING

from ...domain.repositories.item_repository import ItemRepository
from ...application.use_cases.search.search_items import SearchItemsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SearchProvider:
    """Search use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            SearchItemsUseCase,
            lambda: SearchItemsUseCase(item_repository=container.get(ItemRepository))
        )
