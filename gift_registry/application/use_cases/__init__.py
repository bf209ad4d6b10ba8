from .item import (
    IngestItemUseCase,
    GetItemUseCase,
    ListItemsUseCase,
    UpdateItemUseCase,
    DeleteItemUseCase,
    RecordGiftUseCase,
)
from .search import SearchItemsUseCase

__all__ = [
    "IngestItemUseCase",
    "GetItemUseCase",
    "ListItemsUseCase",
    "UpdateItemUseCase",
    "DeleteItemUseCase",
    "RecordGiftUseCase",
    "SearchItemsUseCase",
]
