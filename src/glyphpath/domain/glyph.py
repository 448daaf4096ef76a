"""Glyph representation.

This module defines the glyph domain model: a character resolved against a
font, with the horizontal metrics needed for layout.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Glyph:
    """A glyph looked up from a font.

    Attributes:
        name: Glyph name (e.g., "A", "B", ".notdef")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int = 0

    @property
    def is_notdef(self) -> bool:
        """True when the font had no glyph for the requested character."""
        return self.name == ".notdef"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "name": self.name,
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "lsb": self.left_side_bearing,
        }
