"""
Search-side models: the filter parsed from a query and the criteria the
item store evaluates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


class SearchContext:
    """Where a retrieval comes from"""
    CONVERSATIONAL = "conversational"
    ADMINISTRATIVE = "administrative"


@dataclass(frozen=True)
class SearchFilter:
    """
    Structured, single-valued filters derived from one free-text query.
    Created per query and discarded after use.
    """

    age_range: Optional[str] = None
    category: Optional[str] = None
    theme: Optional[str] = None
    keyword: Optional[str] = None
    free_text: Optional[str] = None

    def is_empty(self) -> bool:
        return not any((self.age_range, self.category, self.theme, self.keyword))


@dataclass(frozen=True)
class RetrievalCriteria:
    """
    Hard predicates (ANDed) plus the free-text terms used for relevance.

    An empty text_terms tuple means results are ordered by recency only.
    """

    availability: Optional[str] = None
    age_range: Optional[str] = None
    category: Optional[str] = None
    theme: Optional[str] = None
    keyword: Optional[str] = None
    text_terms: Tuple[str, ...] = ()
