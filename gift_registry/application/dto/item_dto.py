from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


AvailabilityValue = Literal["available", "reserved", "gifted"]
ConditionValue = Literal["new", "like-new", "gently-used", "vintage"]


class PhotoUpload(BaseModel):
    """One uploaded photo handed to the ingest use case"""
    filename: str
    content: bytes
    content_type: Optional[str] = None


class PhotoResponse(BaseModel):
    """DTO for a stored photo"""
    photo_id: str
    file_path: str
    file_name: str
    is_primary: bool = False
    uploaded_at: Optional[datetime] = None
    url: Optional[str] = None


class TagSetResponse(BaseModel):
    """DTO for the tags computed at ingestion"""
    category: str
    age_ranges: List[str]
    themes: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    description: str = ""
    detected_text: str = ""
    dominant_colors: List[str] = Field(default_factory=list)
    confidence_scores: Dict[str, float] = Field(default_factory=dict)


class GiftRecordResponse(BaseModel):
    """DTO for one gifting history entry"""
    gifted_at: datetime
    recipient_name: Optional[str] = None
    recipient_age: Optional[int] = None
    occasion: Optional[str] = None
    notes: Optional[str] = None


class ItemResponse(TagSetResponse):
    """DTO for item response: tag set fields plus administrative fields"""
    id: str
    location: Optional[str] = None
    condition: Optional[str] = None
    notes: Optional[str] = None
    availability: str
    uploaded_at: datetime
    updated_at: Optional[datetime] = None
    photos: List[PhotoResponse] = Field(default_factory=list)
    gift_history: List[GiftRecordResponse] = Field(default_factory=list)


class ItemListResponse(BaseModel):
    """DTO for an administrative item listing"""
    items: List[ItemResponse]
    count: int


class IngestItemResponse(BaseModel):
    """DTO returned after creating an item from photos"""
    message: str
    item: ItemResponse
    tag_set: TagSetResponse


class ItemUpdateRequest(BaseModel):
    """DTO for updating administrative fields. Tag set fields are not accepted."""
    model_config = ConfigDict(extra="forbid")

    location: Optional[str] = None
    condition: Optional[ConditionValue] = None
    notes: Optional[str] = None
    availability: Optional[AvailabilityValue] = None


class GiftRecordRequest(BaseModel):
    """DTO for recording that an item was gifted"""
    recipient_name: Optional[str] = None
    recipient_age: Optional[int] = Field(default=None, ge=0, le=150)
    occasion: Optional[str] = None
    notes: Optional[str] = None


class MessageResponse(BaseModel):
    """Plain message DTO"""
    message: str
