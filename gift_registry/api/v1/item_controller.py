# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, File, HTTPException, Query, UploadFile, status

# Local application imports
from ...application.dto.item_dto import (
    AvailabilityValue,
    GiftRecordRequest,
    IngestItemResponse,
    ItemListResponse,
    ItemResponse,
    ItemUpdateRequest,
    MessageResponse,
    PhotoUpload,
)
from ...application.dto.search_dto import SearchRequest, SearchResponse
from ...application.use_cases.item.ingest_item import IngestItemUseCase
from ...application.use_cases.item.get_item import GetItemUseCase
from ...application.use_cases.item.list_items import ListItemsUseCase
from ...application.use_cases.item.update_item import UpdateItemUseCase
from ...application.use_cases.item.delete_item import DeleteItemUseCase
from ...application.use_cases.item.record_gift import RecordGiftUseCase
from ...application.use_cases.search.search_items import SearchItemsUseCase
from ...domain.exceptions import (
    GiftRegistryError,
    NotFoundError,
    ProviderError,
    ValidationError,
    get_user_message,
)
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"])


def _to_http_exception(exception: GiftRegistryError) -> HTTPException:
    """Map a domain error to the HTTP status clients see"""
    if isinstance(exception, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exception, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, ProviderError):
        if exception.kind == ProviderError.TIMEOUT:
            status_code = status.HTTP_504_GATEWAY_TIMEOUT
        else:
            status_code = status.HTTP_502_BAD_GATEWAY
    else:
        # StoreError and anything unexpected
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if status_code >= 500:
        logger.error(f"Request failed: {exception.message}")
    return HTTPException(status_code=status_code, detail=get_user_message(exception))


@router.post("/upload", response_model=IngestItemResponse, status_code=status.HTTP_201_CREATED)
async def upload_item(
    photos: List[UploadFile] = File(...),
) -> IngestItemResponse:
    """
    Create an item from one or more photos

    The first photo is analyzed and becomes the primary photo.

    Returns:
        IngestItemResponse with the created item and its tag set
    """
    uploads = [
        PhotoUpload(
            filename=photo.filename or "",
            content=await photo.read(),
            content_type=photo.content_type,
        )
        for photo in photos
    ]

    container = get_container()
    ingest_item_use_case = container.get(IngestItemUseCase)

    try:
        return await ingest_item_use_case.execute(photos=uploads)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.get("", response_model=ItemListResponse)
async def list_items(
    availability: Optional[AvailabilityValue] = Query(None),
    category: Optional[str] = Query(None),
    age_range: Optional[str] = Query(None),
) -> ItemListResponse:
    """
    List items, newest first

    Args:
        availability: Optional availability filter
        category: Optional category filter
        age_range: Optional age range filter
    """
    container = get_container()
    list_items_use_case = container.get(ListItemsUseCase)

    try:
        return await list_items_use_case.execute(
            availability=availability,
            category=category,
            age_range=age_range,
        )
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.post("/search", response_model=SearchResponse)
async def search_items(request: SearchRequest) -> SearchResponse:
    """
    Search available items with a conversational query

    Returns:
        SearchResponse with the parsed filters and matching items
    """
    container = get_container()
    search_items_use_case = container.get(SearchItemsUseCase)

    try:
        return await search_items_use_case.execute(request)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str) -> ItemResponse:
    """Get an item by ID"""
    container = get_container()
    get_item_use_case = container.get(GetItemUseCase)

    try:
        return await get_item_use_case.execute(item_id)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(item_id: str, request: ItemUpdateRequest) -> ItemResponse:
    """
    Update location, condition, notes and/or availability of an item

    Tags are computed once at ingestion and cannot be edited.
    """
    container = get_container()
    update_item_use_case = container.get(UpdateItemUseCase)

    try:
        return await update_item_use_case.execute(item_id, request)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: str) -> MessageResponse:
    """Delete an item by ID"""
    container = get_container()
    delete_item_use_case = container.get(DeleteItemUseCase)

    try:
        return await delete_item_use_case.execute(item_id)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)


@router.post("/{item_id}/gift", response_model=ItemResponse)
async def record_gift(item_id: str, request: GiftRecordRequest) -> ItemResponse:
    """Record that an item was given away; the item becomes unavailable to search"""
    container = get_container()
    record_gift_use_case = container.get(RecordGiftUseCase)

    try:
        return await record_gift_use_case.execute(item_id, request)
    except GiftRegistryError as exception:
        raise _to_http_exception(exception)
