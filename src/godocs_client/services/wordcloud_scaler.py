"""Word cloud scaling: frequency to font size, rank to perceptual color.

Both mappings are pure functions. Font size grows logarithmically with
frequency so a few very common words do not dominate the layout. Color is
an OKLCH heat map over display rank: lightness and chroma are fixed and only
the hue moves, from blue (most frequent) through cyan, green and yellow to
red (least frequent of the displayed set).
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Union

from godocs_client.schemas import WordFrequency

MIN_FONT_SIZE = 12.0
MAX_FONT_SIZE = 64.0

LIGHTNESS = 0.65
CHROMA = 0.15

# Returned for an empty word list
DEFAULT_COLOR = "#3b82f6"

# Hue breakpoints: blue 240, cyan 200, green 140, yellow 90, red 30
SEGMENT_WIDTH = 0.25


def font_size(freq: int, min_freq: int, max_freq: int) -> float:
    """Map a frequency onto [12.0, 64.0] pixels on a logarithmic scale.

    ``min_freq`` maps to 12.0 and ``max_freq`` to 64.0. When every word has the
    same frequency the midpoint 38.0 is used.
    """
    if max_freq == min_freq:
        return (MIN_FONT_SIZE + MAX_FONT_SIZE) / 2

    ratio = math.log(freq - min_freq + 1) / math.log(max_freq - min_freq + 1)
    return MIN_FONT_SIZE + ratio * (MAX_FONT_SIZE - MIN_FONT_SIZE)


def hue_at(position: float) -> float:
    """Heat map hue in degrees for a position in [0, 1).

    Piecewise linear over four equal segments.
    """
    if position < 0.25:
        t = position / SEGMENT_WIDTH
        return 240 - t * 40
    elif position < 0.5:
        t = (position - 0.25) / SEGMENT_WIDTH
        return 200 - t * 60
    elif position < 0.75:
        t = (position - 0.5) / SEGMENT_WIDTH
        return 140 - t * 50
    t = (position - 0.75) / SEGMENT_WIDTH
    return 90 - t * 60


@dataclass(frozen=True)
class WordColor:
    """An OKLCH color triple. The hue is in whole degrees."""

    lightness: float
    chroma: float
    hue: int

    @property
    def css_hue(self) -> int:
        """Hue as written into the CSS value."""
        return int(self.hue)

    def css(self) -> str:
        """CSS oklch() notation, e.g. ``oklch(0.65 0.15 240deg)``."""
        return f"oklch({self.lightness:.2f} {self.chroma:.2f} {self.css_hue}deg)"

    def to_hex(self) -> str:
        """Convert to an sRGB hex string for targets without OKLCH support.

        Uses the OKLab reference matrices; out-of-gamut channels are clipped.
        """
        h = math.radians(self.css_hue)
        a = self.chroma * math.cos(h)
        b = self.chroma * math.sin(h)

        l_ = self.lightness + 0.3963377774 * a + 0.2158037573 * b
        m_ = self.lightness - 0.1055613458 * a - 0.0638541728 * b
        s_ = self.lightness - 0.0894841775 * a - 1.2914855480 * b
        l, m, s = l_**3, m_**3, s_**3

        linear = (
            4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
            -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
            -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
        )
        return "#" + "".join(f"{_encode_srgb(channel):02x}" for channel in linear)

    def __str__(self) -> str:
        return self.css()


def _encode_srgb(linear: float) -> int:
    linear = min(max(linear, 0.0), 1.0)
    if linear <= 0.0031308:
        encoded = 12.92 * linear
    else:
        encoded = 1.055 * linear ** (1 / 2.4) - 0.055
    return round(min(max(encoded, 0.0), 1.0) * 255)


def color(index: int, total: int) -> Union[WordColor, str]:
    """Heat map color for the word at display rank ``index`` of ``total``.

    Returns DEFAULT_COLOR when ``total <= 0``.
    """
    if total <= 0:
        return DEFAULT_COLOR
    return heat_color(index, total)


def heat_color(index: int, total: int) -> WordColor:
    """color() for a non-empty list. The hue is truncated to whole degrees."""
    position = index / total
    return WordColor(lightness=LIGHTNESS, chroma=CHROMA, hue=int(hue_at(position)))


def css_color(index: int, total: int) -> str:
    """color() serialized as a CSS color string."""
    value = color(index, total)
    return value if isinstance(value, str) else value.css()


def hex_color(index: int, total: int) -> str:
    """color() serialized as an sRGB hex string."""
    value = color(index, total)
    return value if isinstance(value, str) else value.to_hex()


@dataclass(frozen=True)
class ScaledWord:
    """A word with its presentation parameters."""

    word: str
    frequency: int
    rank: int
    font_size: float
    color: WordColor

    @property
    def title(self) -> str:
        """Hover text shown for the word."""
        return f"{self.word}: {self.frequency} occurrences"


def scale_words(entries: Sequence[WordFrequency]) -> List[ScaledWord]:
    """Sort entries by descending frequency and scale each by its rank.

    The highest frequency is taken from the first entry and the lowest from
    the last one after sorting. The sort is stable, so ties keep server order.
    """
    words = sorted(entries, key=lambda entry: entry.frequency, reverse=True)
    if not words:
        return []

    max_freq = words[0].frequency
    min_freq = words[-1].frequency
    total = len(words)

    scaled = []
    for rank, entry in enumerate(words):
        scaled.append(
            ScaledWord(
                word=entry.word,
                frequency=entry.frequency,
                rank=rank,
                font_size=font_size(entry.frequency, min_freq, max_freq),
                color=heat_color(rank, total),
            )
        )
    return scaled
