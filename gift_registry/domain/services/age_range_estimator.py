"""Multi-label age range inference from keyword evidence."""
from typing import Sequence, Tuple

from ..constants import AgeRange
from .rules import all_matches, keyword_rules

AGE_RANGE_TERMS = (
    (AgeRange.BABY, ("baby", "infant", "rattle", "pacifier", "bottle", "crib")),
    (AgeRange.YOUNG_CHILD, ("toddler", "preschool", "stuffed animal", "plush", "simple toy", "building blocks")),
    (AgeRange.OLDER_CHILD, ("toy", "game", "puzzle", "lego", "action figure", "doll")),
    (AgeRange.TEEN, ("electronics", "gadget", "sports", "fashion", "tech")),
    (AgeRange.ADULT, ("wine", "coffee", "kitchen", "home decor", "book", "tool")),
)

AGE_RANGE_RULES = keyword_rules(AGE_RANGE_TERMS)


def estimate_age_ranges(keywords: Sequence[str]) -> Tuple[str, ...]:
    """Every age range with matching evidence, in canonical order; never empty."""
    ranges = all_matches(AGE_RANGE_RULES, keywords)
    if not ranges:
        return (AgeRange.ANY_AGE,)
    return tuple(ranges)
