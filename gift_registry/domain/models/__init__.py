from .tag_set import RGB, Annotation, RawImageSignals, TagSet
from .item import Item, Photo, GiftRecord
from .search import SearchContext, SearchFilter, RetrievalCriteria

__all__ = [
    "RGB",
    "Annotation",
    "RawImageSignals",
    "TagSet",
    "Item",
    "Photo",
    "GiftRecord",
    "SearchContext",
    "SearchFilter",
    "RetrievalCriteria",
]
