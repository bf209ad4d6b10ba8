from .item_dto import (
    PhotoUpload,
    PhotoResponse,
    TagSetResponse,
    GiftRecordResponse,
    ItemResponse,
    ItemListResponse,
    IngestItemResponse,
    ItemUpdateRequest,
    GiftRecordRequest,
    MessageResponse,
)
from .search_dto import SearchRequest, SearchFilterResponse, SearchResponse

__all__ = [
    "PhotoUpload",
    "PhotoResponse",
    "TagSetResponse",
    "GiftRecordResponse",
    "ItemResponse",
    "ItemListResponse",
    "IngestItemResponse",
    "ItemUpdateRequest",
    "GiftRecordRequest",
    "MessageResponse",
    "SearchRequest",
    "SearchFilterResponse",
    "SearchResponse",
]
