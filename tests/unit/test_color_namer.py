"""
Unit tests for gift_registry.domain.services.color_namer
"""
import pytest

from gift_registry.domain.services.color_namer import PALETTE, name_color


class TestNameColor:
    def test_near_black(self):
        assert name_color((10, 10, 10)) == "black"

    def test_near_white(self):
        assert name_color((250, 250, 250)) == "white"

    @pytest.mark.parametrize("name,rgb", PALETTE)
    def test_exact_palette_entries(self, name, rgb):
        assert name_color(rgb) == name

    def test_tie_goes_to_earlier_entry(self):
        # Equidistant from black and blue
        assert name_color((0, 0, 127.5)) == "black"

    def test_float_channels(self):
        assert name_color((254.6, 0.2, 1.0)) == "red"

    def test_palette_order(self):
        assert [name for name, _ in PALETTE] == [
            "black", "white", "gray", "red", "green", "blue",
            "yellow", "orange", "purple", "pink", "brown",
        ]
