"""
Selection and ordering of items for a SearchFilter.

``build_criteria`` turns a parsed filter plus the calling context into
RetrievalCriteria that any item store can evaluate. ``apply`` is the
reference evaluation over in-memory items; the MongoDB repository expresses
the same criteria as a query document and a weighted text index.

Rules:
- every present structured field is a hard predicate, ANDed together
- conversational search always restricts availability to "available"
- with free-text terms, an item is kept only when every term occurs in at
  least one searchable field; kept items are ranked by weighted score and
  then by upload recency
- without free-text terms, items are ordered by upload recency
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..constants import Availability, ItemFields
from ..models.item import Item
from ..models.search import RetrievalCriteria, SearchContext, SearchFilter

# Weighted searchable projection, highest weight first.
# Dominant color names carry keyword weight.
SEARCH_FIELD_WEIGHTS: Tuple[Tuple[str, int], ...] = (
    (ItemFields.CATEGORY, 10),
    (ItemFields.KEYWORDS, 4),
    (ItemFields.DOMINANT_COLORS, 4),
    (ItemFields.DESCRIPTION, 2),
    (ItemFields.NOTES, 1),
)

STOP_WORDS = frozenset({
    "a", "about", "after", "all", "also", "an", "and", "any", "are", "as", "at",
    "be", "been", "but", "by", "can", "could", "did", "do", "does", "for", "from",
    "get", "give", "had", "has", "have", "he", "her", "him", "his", "how", "i",
    "if", "in", "into", "is", "it", "its", "just", "like", "me", "my", "of", "on",
    "or", "our", "out", "she", "should", "so", "some", "something", "that", "the",
    "their", "them", "there", "these", "they", "this", "those", "to", "up", "us",
    "was", "we", "were", "what", "when", "which", "who", "whom", "why", "will",
    "with", "would", "you", "your",
})

_WORD_PATTERN = re.compile(r"[a-z0-9]+")


def _fold(word: str) -> str:
    """Light plural folding so "toys" matches "toy"."""
    if len(word) > 4 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 3 and word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def _words(text: Optional[str]) -> Set[str]:
    if not text:
        return set()
    return {_fold(word) for word in _WORD_PATTERN.findall(text.lower())}


def search_terms(text: Optional[str]) -> Tuple[str, ...]:
    """Searchable terms of a free-text query, in order, without stop words."""
    if not text:
        return ()
    terms: List[str] = []
    for word in _WORD_PATTERN.findall(text.lower()):
        if word in STOP_WORDS:
            continue
        folded = _fold(word)
        if folded not in terms:
            terms.append(folded)
    return tuple(terms)


def build_criteria(
    search_filter: SearchFilter,
    context: str = SearchContext.CONVERSATIONAL,
    availability: Optional[str] = None,
) -> RetrievalCriteria:
    """
    Combine a SearchFilter with the calling context.

    Conversational search forces availability to "available"; an
    administrative listing only constrains availability when one is given.
    """
    if context == SearchContext.CONVERSATIONAL:
        availability = Availability.AVAILABLE

    return RetrievalCriteria(
        availability=availability,
        age_range=search_filter.age_range,
        category=search_filter.category,
        theme=search_filter.theme,
        keyword=search_filter.keyword.lower() if search_filter.keyword else None,
        text_terms=search_terms(search_filter.free_text),
    )


def matches(item: Item, criteria: RetrievalCriteria) -> bool:
    """True when item satisfies every structured predicate of criteria."""
    tags = item.tag_set
    if criteria.availability and item.availability != criteria.availability:
        return False
    if criteria.age_range and criteria.age_range not in tags.age_ranges:
        return False
    if criteria.category and tags.category != criteria.category:
        return False
    if criteria.theme and criteria.theme not in tags.themes:
        return False
    if criteria.keyword and criteria.keyword not in tags.keywords:
        return False
    return True


def _projection(item: Item) -> Dict[str, Set[str]]:
    tags = item.tag_set
    return {
        ItemFields.CATEGORY: _words(tags.category),
        ItemFields.KEYWORDS: _words(" ".join(tags.keywords)),
        ItemFields.DOMINANT_COLORS: _words(" ".join(tags.dominant_colors)),
        ItemFields.DESCRIPTION: _words(tags.description),
        ItemFields.NOTES: _words(item.notes),
    }


def _term_weights(projection: Dict[str, Set[str]], term: str) -> int:
    return sum(weight for field_name, weight in SEARCH_FIELD_WEIGHTS if term in projection[field_name])


def relevance(item: Item, terms: Iterable[str]) -> int:
    """Sum of field weights over every (term, field) pair where the term occurs."""
    projection = _projection(item)
    return sum(_term_weights(projection, term) for term in terms)


def matches_text(item: Item, terms: Iterable[str]) -> bool:
    """True when every term occurs in at least one searchable field."""
    projection = _projection(item)
    return all(_term_weights(projection, term) > 0 for term in terms)


def apply(items: Iterable[Item], criteria: RetrievalCriteria) -> List[Item]:
    """Filter and order items according to criteria."""
    candidates = [item for item in items if matches(item, criteria)]

    if not criteria.text_terms:
        return sorted(candidates, key=lambda item: item.uploaded_at, reverse=True)

    scored = [
        (relevance(item, criteria.text_terms), item)
        for item in candidates
        if matches_text(item, criteria.text_terms)
    ]
    scored.sort(key=lambda pair: (pair[0], pair[1].uploaded_at), reverse=True)
    return [item for _, item in scored]
