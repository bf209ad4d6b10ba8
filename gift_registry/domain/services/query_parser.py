"""
Maps one free-text query into a best-effort SearchFilter.

Three independent steps run in order, each a first-match-wins rule table:
age range, then category, then theme. Parsing never fails; a query that
matches nothing yields an empty filter that still carries the free text.
"""

from __future__ import annotations

import re
from typing import Tuple

from ..constants import AgeRange, Category, Theme
from ..models.search import SearchFilter
from .rules import PatternRule, PhraseRule, Rule, first_match


def bucket_age(age: int) -> str:
    """Map an age in years to its age range."""
    if age <= 2:
        return AgeRange.BABY
    if age <= 6:
        return AgeRange.YOUNG_CHILD
    if age <= 12:
        return AgeRange.OLDER_CHILD
    if age <= 17:
        return AgeRange.TEEN
    return AgeRange.ADULT


def _words(*alternatives: str) -> "re.Pattern[str]":
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b")


AGE_RULES: Tuple[Rule, ...] = (
    PatternRule(_words("baby", "babies", "infant", "infants", "newborn", "newborns"), AgeRange.BABY),
    PatternRule(
        _words("toddler", "toddlers", "preschool", "preschooler", "preschoolers", "young child", "young children"),
        AgeRange.YOUNG_CHILD,
    ),
    # "6 year old", "6-year-old", "10 years old", "3 yr old"
    PatternRule(
        re.compile(r"\b(\d{1,3})[\s-]*(?:years?|yrs?)[\s-]*old\b"),
        resolve=lambda match: bucket_age(int(match.group(1))),
    ),
    PatternRule(_words("kid", "kids", "child", "children"), AgeRange.OLDER_CHILD),
    PatternRule(
        _words("teen", "teens", "teenager", "teenagers", "adolescent", "adolescents"),
        AgeRange.TEEN,
    ),
    PatternRule(_words("adult", "adults", "grown-up", "grown-ups", "grownup", "grownups"), AgeRange.ADULT),
    PatternRule(
        _words(
            "grandmother", "grandmothers", "grandfather", "grandfathers", "grandma", "grandpa",
            "grandparent", "grandparents", "senior", "seniors", "elderly",
        ),
        AgeRange.ADULT,
    ),
)


def _category_phrases(slug: str) -> Tuple[str, ...]:
    spaced = slug.replace("-", " ")
    return (slug,) if spaced == slug else (slug, spaced)


CATEGORY_RULES: Tuple[Rule, ...] = tuple(
    PhraseRule(slug, _category_phrases(slug)) for slug in Category.ORDERED
)

THEME_RULES: Tuple[Rule, ...] = tuple(PhraseRule(theme, (theme,)) for theme in Theme.ORDERED)


def parse_query(text: str) -> SearchFilter:
    """
    Parse a trimmed, non-empty query into a SearchFilter.

    The original text is preserved as free_text.
    """
    query = text.lower()
    return SearchFilter(
        age_range=first_match(AGE_RULES, query),
        category=first_match(CATEGORY_RULES, query),
        theme=first_match(THEME_RULES, query),
        free_text=text,
    )
