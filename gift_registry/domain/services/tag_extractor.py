"""
Builds an item's TagSet from the provider's raw signals for one photo.

``extract_tags`` is pure: identical signals always produce an identical
TagSet. ``TagExtractor`` adds the single provider call in front of it.
"""

# Standard library imports
import logging
from typing import List, Sequence

# Local application imports
from ..exceptions import ProviderError
from ..models.tag_set import Annotation, RawImageSignals, TagSet
from ..providers.image_analysis_provider import ImageAnalysisProvider
from .age_range_estimator import estimate_age_ranges
from .categorizer import categorize
from .color_namer import name_color
from .rules import KeywordSet
from .theme_detector import detect_themes

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.6
MAX_DOMINANT_COLORS = 3
MAX_DESCRIPTION_OBJECTS = 2
MAX_DESCRIPTION_LABELS = 3


def _collect_keywords(signals: RawImageSignals) -> KeywordSet:
    keywords = KeywordSet()
    for annotation in (*signals.labels, *signals.objects):
        if annotation.score > CONFIDENCE_THRESHOLD:
            keywords.add(annotation.description, annotation.score)
    return keywords


def _dominant_color_names(signals: RawImageSignals) -> List[str]:
    names: List[str] = []
    for rgb in signals.dominant_colors_rgb[:MAX_DOMINANT_COLORS]:
        name = name_color(rgb)
        if name not in names:
            names.append(name)
    return names


def _describe(labels: Sequence[Annotation], objects: Sequence[Annotation]) -> str:
    seen = set()
    parts: List[str] = []
    candidates = [*objects[:MAX_DESCRIPTION_OBJECTS], *labels[:MAX_DESCRIPTION_LABELS]]
    for annotation in candidates:
        text = annotation.description.strip()
        if text and text.lower() not in seen:
            seen.add(text.lower())
            parts.append(text)
    return ", ".join(parts)


def extract_tags(signals: RawImageSignals) -> TagSet:
    """
    Convert raw image signals into a complete TagSet.

    Color names feed the classifiers alongside the annotation keywords but
    are kept in dominant_colors rather than keywords, so every stored
    keyword has a confidence score above the threshold. dominant_colors is
    searchable at keyword weight.
    """
    keywords = _collect_keywords(signals)
    colors = _dominant_color_names(signals)

    evidence = list(keywords)
    evidence.extend(color for color in colors if color not in keywords)

    return TagSet(
        category=categorize(evidence),
        age_ranges=estimate_age_ranges(evidence),
        themes=detect_themes(evidence),
        keywords=keywords.as_tuple(),
        description=_describe(signals.labels, signals.objects),
        detected_text=signals.detected_text[0] if signals.detected_text else "",
        dominant_colors=tuple(colors),
        confidence_scores=keywords.scores(),
    )


class TagExtractor:
    """Runs the image-analysis provider once and derives the TagSet."""

    def __init__(self, provider: ImageAnalysisProvider) -> None:
        self.provider = provider

    async def extract(self, image_ref: str) -> TagSet:
        """
        Analyze image_ref and build its TagSet.

        Raises:
            ProviderError: If the provider call fails; no partial TagSet is produced.
        """
        try:
            signals = await self.provider.analyze(image_ref)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"Image analysis failed: {e}", kind=ProviderError.UNAVAILABLE) from e

        tag_set = extract_tags(signals)
        logger.debug(
            f"Extracted tags for {image_ref}: category={tag_set.category} "
            f"age_ranges={list(tag_set.age_ranges)} themes={list(tag_set.themes)}"
        )
        return tag_set
