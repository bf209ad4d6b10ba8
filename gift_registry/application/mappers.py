"""Domain model -> DTO conversions shared by the use cases."""
from pathlib import PurePath

from ..domain.models import GiftRecord, Item, Photo, SearchFilter, TagSet
from .dto.item_dto import GiftRecordResponse, ItemResponse, PhotoResponse, TagSetResponse
from .dto.search_dto import SearchFilterResponse


def tag_set_to_response(tag_set: TagSet) -> TagSetResponse:
    return TagSetResponse(
        category=tag_set.category,
        age_ranges=list(tag_set.age_ranges),
        themes=list(tag_set.themes),
        keywords=list(tag_set.keywords),
        description=tag_set.description,
        detected_text=tag_set.detected_text,
        dominant_colors=list(tag_set.dominant_colors),
        confidence_scores=dict(tag_set.confidence_scores),
    )


def _photo_to_response(photo: Photo) -> PhotoResponse:
    return PhotoResponse(
        photo_id=photo.photo_id,
        file_path=photo.file_path,
        file_name=photo.file_name,
        is_primary=photo.is_primary,
        uploaded_at=photo.uploaded_at,
        url=f"/uploads/{PurePath(photo.file_path).name}",
    )


def _gift_to_response(gift: GiftRecord) -> GiftRecordResponse:
    return GiftRecordResponse(
        gifted_at=gift.gifted_at,
        recipient_name=gift.recipient_name,
        recipient_age=gift.recipient_age,
        occasion=gift.occasion,
        notes=gift.notes,
    )


def item_to_response(item: Item) -> ItemResponse:
    tags = tag_set_to_response(item.tag_set)
    # Primary photo first, then newest
    photos = sorted(
        item.photos,
        key=lambda photo: (photo.is_primary, photo.uploaded_at.timestamp() if photo.uploaded_at else 0.0),
        reverse=True,
    )
    return ItemResponse(
        **tags.model_dump(),
        id=item.id or "",
        location=item.location,
        condition=item.condition,
        notes=item.notes,
        availability=item.availability,
        uploaded_at=item.uploaded_at,
        updated_at=item.updated_at,
        photos=[_photo_to_response(photo) for photo in photos],
        gift_history=[_gift_to_response(gift) for gift in item.gift_history],
    )


def filter_to_response(search_filter: SearchFilter) -> SearchFilterResponse:
    return SearchFilterResponse(
        age_range=search_filter.age_range,
        category=search_filter.category,
        theme=search_filter.theme,
        keyword=search_filter.keyword,
        free_text=search_filter.free_text,
    )
