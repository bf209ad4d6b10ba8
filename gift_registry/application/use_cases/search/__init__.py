from .search_items import SearchItemsUseCase

__all__ = ["SearchItemsUseCase"]
