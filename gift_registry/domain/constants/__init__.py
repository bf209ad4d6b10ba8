"""Constants for domain model field names and vocabularies"""

from .item_fields import ItemFields, PhotoFields, GiftFields
from .vocabulary import Category, AgeRange, Theme, Availability, Condition

__all__ = [
    "ItemFields",
    "PhotoFields",
    "GiftFields",
    "Category",
    "AgeRange",
    "Theme",
    "Availability",
    "Condition",
]
