# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..constants import Availability, Condition
from .tag_set import TagSet


@dataclass
class Photo:
    """Stored photo of an item. The first photo of an item is its primary one."""
    photo_id: str
    file_path: str
    file_name: str
    is_primary: bool = False
    uploaded_at: Optional[datetime] = None


@dataclass
class GiftRecord:
    """One entry of an item's gifting history"""
    gifted_at: datetime
    recipient_name: Optional[str] = None
    recipient_age: Optional[int] = None
    occasion: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class Item:
    """
    Pure domain model for a physical item in the registry.

    The tag set is computed once at ingestion and never recomputed; only the
    administrative fields (location, condition, notes, availability) change
    afterwards.
    """
    id: Optional[str]
    tag_set: TagSet
    uploaded_at: datetime
    updated_at: Optional[datetime] = None
    photos: List[Photo] = field(default_factory=list)
    location: Optional[str] = None
    condition: Optional[str] = None
    notes: Optional[str] = None
    availability: str = Availability.AVAILABLE
    gift_history: List[GiftRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Business validations"""
        if self.tag_set is None:
            raise ValueError("Item tag set is required")
        if self.availability not in Availability.ALL:
            raise ValueError(f"Invalid availability: {self.availability}")
        if self.condition is not None and self.condition not in Condition.ALL:
            raise ValueError(f"Invalid condition: {self.condition}")
