"""
Unit tests for the keyword classifiers (category, age ranges, themes).
"""
from gift_registry.domain.services.age_range_estimator import estimate_age_ranges
from gift_registry.domain.services.categorizer import CATEGORY_TERMS, categorize
from gift_registry.domain.services.theme_detector import detect_themes


class TestCategorize:
    def test_lego_is_toys(self):
        assert categorize(["lego", "red"]) == "toys"

    def test_no_match_is_other(self):
        assert categorize(["zzz"]) == "other"

    def test_empty_is_other(self):
        assert categorize([]) == "other"

    def test_priority_is_positional(self):
        # "puzzle" is games-puzzles, "book" is books; games-puzzles is declared first
        assert categorize(["book", "puzzle"]) == "games-puzzles"

    def test_bidirectional_substring(self):
        assert categorize(["coffee mug"]) == "kitchen"
        assert categorize(["vas"]) == "home-decor"

    def test_declaration_order(self):
        assert [category for category, _ in CATEGORY_TERMS] == [
            "toys", "games-puzzles", "books", "kitchen", "home-decor", "electronics",
            "clothing-accessories", "stationery-craft", "sports-outdoors",
            "collectibles", "wellness-beauty",
        ]


class TestEstimateAgeRanges:
    def test_multi_label_in_canonical_order(self):
        assert estimate_age_ranges(["book", "rattle", "lego"]) == ("baby", "older-child", "adult")

    def test_fallback_any_age(self):
        assert estimate_age_ranges(["zzz"]) == ("any-age",)

    def test_never_empty(self):
        assert estimate_age_ranges([]) == ("any-age",)

    def test_plush_toy(self):
        # "plush" for young-child, "toy" for older-child
        assert estimate_age_ranges(["plush toy"]) == ("young-child", "older-child")


class TestDetectThemes:
    def test_multiple_themes_in_declaration_order(self):
        assert detect_themes(["dog", "book", "science kit"]) == ("educational", "reading", "animals")

    def test_may_be_empty(self):
        assert detect_themes(["zzz"]) == ()

    def test_vehicles(self):
        assert detect_themes(["toy truck"]) == ("vehicles",)
