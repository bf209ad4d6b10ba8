"""Multi-label theme inference from keyword evidence."""
from typing import Sequence, Tuple

from ..constants import Theme
from .rules import all_matches, keyword_rules

THEME_TERMS = (
    (Theme.EDUCATIONAL, ("educational", "learning", "school", "teach", "science", "math")),
    (Theme.CREATIVE, ("art", "craft", "creative", "drawing", "painting", "music")),
    (Theme.OUTDOOR, ("outdoor", "nature", "camping", "hiking", "sports")),
    (Theme.INDOOR, ("indoor", "board game", "puzzle", "reading")),
    (Theme.TECH, ("electronic", "tech", "digital", "computer", "gadget")),
    (Theme.COOKING, ("cooking", "kitchen", "baking", "food")),
    (Theme.READING, ("book", "novel", "reading", "magazine")),
    (Theme.ANIMALS, ("animal", "pet", "dog", "cat", "wildlife")),
    (Theme.VEHICLES, ("car", "truck", "vehicle", "train", "airplane")),
)

THEME_RULES = keyword_rules(THEME_TERMS)


def detect_themes(keywords: Sequence[str]) -> Tuple[str, ...]:
    """Every matching theme in declaration order; may be empty."""
    return tuple(all_matches(THEME_RULES, keywords))
