"""
Types for image-analysis signals and the tag record derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Annotation:
    """
    A label or localized object reported by the image-analysis provider.
    """

    description: str
    score: float


@dataclass(frozen=True)
class RawImageSignals:
    """
    Provider output for one photo. Sequences keep the provider's own ranking.
    """

    labels: Tuple[Annotation, ...] = ()
    objects: Tuple[Annotation, ...] = ()
    detected_text: Tuple[str, ...] = ()
    dominant_colors_rgb: Tuple[RGB, ...] = ()


@dataclass(frozen=True)
class TagSet:
    """
    Structured classification of one item, computed once at ingestion.

    age_ranges is never empty (falls back to any-age) and category is always
    set (falls back to other).
    """

    category: str
    age_ranges: Tuple[str, ...]
    themes: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    description: str = ""
    detected_text: str = ""
    dominant_colors: Tuple[str, ...] = ()
    confidence_scores: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.category:
            raise ValueError("TagSet category is required")
        if not self.age_ranges:
            raise ValueError("TagSet age_ranges must not be empty")
