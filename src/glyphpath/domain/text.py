"""Text layout types: alignment modes, metrics and font selection."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TextAlign(str, Enum):
    """Horizontal alignment of text relative to the anchor point."""

    START = "start"
    LEFT = "left"
    END = "end"
    RIGHT = "right"
    CENTER = "center"


class TextBaseline(str, Enum):
    """Vertical alignment of text relative to the anchor point."""

    ALPHABETIC = "alphabetic"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Measured extent of a string, in the same units as the font size.

    Attributes:
        width: Sum of glyph advance widths
        em_height_ascent: Font ascender scaled to the font size
        em_height_descent: Font descender scaled to the font size (usually negative)
    """

    width: float
    em_height_ascent: float
    em_height_descent: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "emHeightAscent": self.em_height_ascent,
            "emHeightDescent": self.em_height_descent,
        }


PLACEHOLDER_METRICS = TextMetrics(width=10.0, em_height_ascent=8.0, em_height_descent=2.0)
"""Returned when no loaded font is available to measure with."""


@dataclass
class FontSpec:
    """Font currently selected on a text context.

    Attributes:
        family: Registry family name
        size: Font size in pixels
    """

    family: str
    size: float = 10.0
