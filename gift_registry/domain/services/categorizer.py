"""Single-label category classification from keyword evidence."""
from typing import Sequence

from ..constants import Category
from .rules import first_match, keyword_rules

# Priority is positional: the first category with any match wins.
CATEGORY_TERMS = (
    (Category.TOYS, ("toy", "doll", "action figure", "stuffed animal", "plush", "lego", "building blocks", "plaything")),
    (Category.GAMES_PUZZLES, ("game", "puzzle", "board game", "card game", "jigsaw")),
    (Category.BOOKS, ("book", "novel", "magazine", "comic", "textbook")),
    (Category.KITCHEN, (
        "pot", "pan", "utensil", "kitchenware", "cookware", "bakeware",
        "knife", "spatula", "bowl", "plate", "cup", "mug",
    )),
    (Category.HOME_DECOR, ("vase", "picture frame", "candle", "decoration", "ornament", "sculpture", "figurine", "lamp")),
    (Category.ELECTRONICS, ("electronic", "gadget", "device", "computer", "phone", "tablet", "speaker", "headphones")),
    (Category.CLOTHING_ACCESSORIES, (
        "clothing", "shirt", "pants", "dress", "hat", "scarf", "jewelry", "watch", "bag", "purse",
    )),
    (Category.STATIONERY_CRAFT, ("pen", "pencil", "notebook", "paper", "craft", "art supply", "marker", "crayon")),
    (Category.SPORTS_OUTDOORS, ("ball", "sports equipment", "bicycle", "outdoor", "camping", "hiking")),
    (Category.COLLECTIBLES, ("collectible", "antique", "vintage", "memorabilia")),
    (Category.WELLNESS_BEAUTY, ("cosmetic", "skincare", "beauty", "perfume", "wellness")),
)

CATEGORY_RULES = keyword_rules(CATEGORY_TERMS)


def categorize(keywords: Sequence[str]) -> str:
    """Return exactly one category; "other" when no term list matches."""
    return first_match(CATEGORY_RULES, keywords) or Category.OTHER
