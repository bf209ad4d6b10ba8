from .mongo_connection import get_database, get_item_collection, close_database
from .mongo_item_repository import MongoItemRepository
from .in_memory_item_repository import InMemoryItemRepository

__all__ = [
    "get_database",
    "get_item_collection",
    "close_database",
    "MongoItemRepository",
    "InMemoryItemRepository",
]
