from .ingest_item import IngestItemUseCase
from .get_item import GetItemUseCase
from .list_items import ListItemsUseCase
from .update_item import UpdateItemUseCase
from .delete_item import DeleteItemUseCase
from .record_gift import RecordGiftUseCase

__all__ = [
    "IngestItemUseCase",
    "GetItemUseCase",
    "ListItemsUseCase",
    "UpdateItemUseCase",
    "DeleteItemUseCase",
    "RecordGiftUseCase",
]
