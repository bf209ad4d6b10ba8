from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .item_provider import ItemProvider
from .search_provider import SearchProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ItemProvider",
    "SearchProvider",
]
