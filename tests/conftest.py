"""
Shared pytest fixtures for gift registry tests.
"""
import os
from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import patch

import pytest

from gift_registry.core.config import Settings
from gift_registry.domain.exceptions import ProviderError
from gift_registry.domain.models.item import Item
from gift_registry.domain.models.tag_set import Annotation, RawImageSignals, TagSet
from gift_registry.domain.providers.image_analysis_provider import ImageAnalysisProvider

BASE_TIME = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_gift_registry",
        "ITEM_STORE": "memory",
        "GOOGLE_VISION_API_KEY": "test_vision_key_placeholder",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(mock_env):
    """
    Real Settings built from mock_env, installed as the settings singleton.
    Every module resolves settings through get_settings(), so one patch covers all use sites.
    """
    settings = Settings()
    with patch("gift_registry.core.config._settings", settings):
        yield settings


class FakeImageAnalysisProvider(ImageAnalysisProvider):
    """In-process provider returning canned signals or raising a canned error."""

    def __init__(self, signals: Optional[RawImageSignals] = None, error: Optional[Exception] = None):
        self.signals = signals or RawImageSignals()
        self.error = error
        self.calls = []

    async def analyze(self, image_ref: str) -> RawImageSignals:
        self.calls.append(image_ref)
        if self.error is not None:
            raise self.error
        return self.signals


@pytest.fixture
def lego_signals():
    """Signals for a photo of a red LEGO set"""
    return RawImageSignals(
        labels=(
            Annotation("Lego", 0.97),
            Annotation("Toy", 0.93),
            Annotation("Plastic", 0.55),
        ),
        objects=(Annotation("Toy", 0.88),),
        detected_text=("LEGO City 60312", "LEGO"),
        dominant_colors_rgb=((250, 10, 10), (245, 245, 245), (240, 5, 20), (10, 10, 10)),
    )


@pytest.fixture
def fake_provider(lego_signals):
    return FakeImageAnalysisProvider(signals=lego_signals)


@pytest.fixture
def failing_provider():
    return FakeImageAnalysisProvider(error=ProviderError("quota exceeded", kind=ProviderError.QUOTA, status_code=429))


@pytest.fixture
def make_item():
    """Factory for Item domain models with sensible tag defaults."""

    def _make_item(
        item_id: str,
        category: str = "toys",
        age_ranges=("older-child",),
        themes=(),
        keywords=(),
        description: str = "",
        notes: Optional[str] = None,
        availability: str = "available",
        minutes_ago: int = 0,
        dominant_colors=(),
    ) -> Item:
        return Item(
            id=item_id,
            tag_set=TagSet(
                category=category,
                age_ranges=tuple(age_ranges),
                themes=tuple(themes),
                keywords=tuple(keywords),
                description=description,
                dominant_colors=tuple(dominant_colors),
            ),
            uploaded_at=BASE_TIME - timedelta(minutes=minutes_ago),
            notes=notes,
            availability=availability,
        )

    return _make_item
