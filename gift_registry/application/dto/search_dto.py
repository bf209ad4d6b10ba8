from typing import List, Optional

from pydantic import BaseModel

from .item_dto import ItemResponse


class SearchRequest(BaseModel):
    """DTO for a conversational search request"""
    query: str


class SearchFilterResponse(BaseModel):
    """DTO for the filters parsed from a query"""
    age_range: Optional[str] = None
    category: Optional[str] = None
    theme: Optional[str] = None
    keyword: Optional[str] = None
    free_text: Optional[str] = None


class SearchResponse(BaseModel):
    """DTO for conversational search results"""
    query: str
    filters: SearchFilterResponse
    items: List[ItemResponse]
    count: int
