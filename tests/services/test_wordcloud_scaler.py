"""Tests for word cloud font size and color scaling."""

import re

import pytest

from godocs_client.schemas import WordFrequency
from godocs_client.services.wordcloud_scaler import (
    DEFAULT_COLOR,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    WordColor,
    color,
    css_color,
    font_size,
    heat_color,
    hex_color,
    hue_at,
    scale_words,
)


class TestFontSize:
    def test_equal_frequencies_use_midpoint(self):
        assert font_size(7, 7, 7) == 38.0

    def test_bounds(self):
        assert 12.0 <= font_size(1, 1, 100) <= 12.5
        assert 63.5 <= font_size(100, 1, 100) <= 64.0

    def test_exact_endpoints(self):
        assert font_size(5, 5, 500) == MIN_FONT_SIZE
        assert font_size(500, 5, 500) == pytest.approx(MAX_FONT_SIZE)

    def test_logarithmic(self):
        # Halfway in log space, not in linear space
        assert font_size(10, 1, 100) == pytest.approx(12.0 + 52.0 * 0.5, abs=0.5)

    def test_monotonic_and_in_range(self):
        sizes = [font_size(f, 1, 1000) for f in range(1000, 0, -7)]
        assert all(12.0 <= s <= 64.0 for s in sizes)
        assert sizes == sorted(sizes, reverse=True)


class TestColor:
    @pytest.mark.parametrize(
        "index,low,high",
        [(0, 235, 240), (25, 195, 205), (50, 135, 145), (75, 85, 95), (99, 28, 32)],
    )
    def test_hue_ranges(self, index, low, high):
        value = color(index, 100)
        assert isinstance(value, WordColor)
        assert low <= value.hue <= high

    def test_hue_is_truncated_to_whole_degrees(self):
        # hue_at(0.99) is 32.4; the descriptor carries the same 32 the CSS string shows
        value = color(99, 100)
        assert value.hue == 32
        assert isinstance(value.hue, int)
        assert value.css() == "oklch(0.65 0.15 32deg)"
        assert heat_color(99, 100) == value

    def test_fixed_lightness_and_chroma(self):
        value = color(10, 40)
        assert value.lightness == 0.65
        assert value.chroma == 0.15

    @pytest.mark.parametrize("total", [0, -3])
    def test_empty_list_sentinel(self, total):
        assert color(0, total) == DEFAULT_COLOR
        assert css_color(0, total) == DEFAULT_COLOR
        assert hex_color(0, total) == DEFAULT_COLOR

    def test_segment_boundaries(self):
        assert hue_at(0.0) == 240
        assert hue_at(0.25) == 200
        assert hue_at(0.5) == 140
        assert hue_at(0.75) == 90

    def test_hue_never_increases(self):
        hues = [color(i, 200).hue for i in range(200)]
        assert all(isinstance(h, int) for h in hues)
        assert hues == sorted(hues, reverse=True)

    def test_css_format(self):
        assert css_color(0, 100) == "oklch(0.65 0.15 240deg)"
        # Hue is truncated, not rounded, in the CSS string
        assert color(1, 3).css() == f"oklch(0.65 0.15 {int(color(1, 3).hue)}deg)"

    def test_hex_format(self):
        for i in range(0, 100, 11):
            assert re.fullmatch(r"#[0-9a-f]{6}", hex_color(i, 100))

    def test_blue_end_is_blue_and_red_end_is_red(self):
        blue = hex_color(0, 100)
        red = hex_color(99, 100)
        r, g, b = (int(blue[i : i + 2], 16) for i in (1, 3, 5))
        assert b > r
        r, g, b = (int(red[i : i + 2], 16) for i in (1, 3, 5))
        assert r > b


class TestScaleWords:
    def test_sorted_by_frequency(self):
        words = scale_words(
            [
                WordFrequency(word="tax", frequency=5),
                WordFrequency(word="invoice", frequency=50),
                WordFrequency(word="receipt", frequency=20),
            ]
        )
        assert [w.word for w in words] == ["invoice", "receipt", "tax"]
        assert [w.rank for w in words] == [0, 1, 2]
        assert words[0].font_size == pytest.approx(64.0)
        assert words[-1].font_size == 12.0
        assert words[0].title == "invoice: 50 occurrences"

    def test_ties_keep_server_order(self):
        words = scale_words(
            [WordFrequency(word="b", frequency=3), WordFrequency(word="a", frequency=3)]
        )
        assert [w.word for w in words] == ["b", "a"]
        assert all(w.font_size == 38.0 for w in words)

    def test_colors_follow_rank(self):
        entries = [WordFrequency(word=f"w{i}", frequency=100 - i) for i in range(4)]
        words = scale_words(entries)
        assert [w.color.hue for w in words] == [int(hue_at(i / 4)) for i in range(4)]
        assert [w.color for w in words] == [color(i, 4) for i in range(4)]

    def test_empty(self):
        assert scale_words([]) == []
