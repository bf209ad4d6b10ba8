"""
Semantic tagging and retrieval engine.

Pure, synchronous classifiers (color naming, categorization, age range and
theme inference, query parsing, retrieval filtering) plus the TagExtractor
that puts the single image-analysis call in front of them.
"""

from .color_namer import name_color
from .categorizer import categorize
from .age_range_estimator import estimate_age_ranges
from .theme_detector import detect_themes
from .tag_extractor import TagExtractor, extract_tags
from .query_parser import parse_query, bucket_age
from . import retrieval_filter

__all__ = [
    "name_color",
    "categorize",
    "estimate_age_ranges",
    "detect_themes",
    "TagExtractor",
    "extract_tags",
    "parse_query",
    "bucket_age",
    "retrieval_filter",
]
