"""Parsed font adapter over fonttools.

This module provides the ParsedFont class: the only place glyphpath
touches fonttools tables. It exposes what text layout needs: glyph
lookup by string, advance widths, units per em, ascender, descender and
the outline path of a string at a given origin and size.
"""

from io import BytesIO

import structlog
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from glyphpath.domain.commands import PathCommand
from glyphpath.domain.glyph import Glyph
from glyphpath.exceptions import FontParseError
from glyphpath.io.pen import PathCommandPen

logger = structlog.get_logger(__name__)

NOTDEF = ".notdef"

# Name table IDs we read
NAME_ID_FAMILY = 1
NAME_ID_TYPOGRAPHIC_FAMILY = 16


class ParsedFont:
    """A font parsed from bytes, ready for measuring and outline extraction.

    The tables needed for layout are read up front, so a font missing one
    fails in ``from_bytes``. Glyph outlines are decoded lazily; a glyph
    whose outline cannot be decoded is skipped by ``get_path`` with a
    warning.

    Example:
        font = ParsedFont.from_bytes(Path("font.ttf").read_bytes())
        glyphs = font.string_to_glyphs("Hi")
        commands = font.get_path("Hi", 10, 40, 16)
    """

    def __init__(self, font: TTFont) -> None:
        """Wrap an already-opened fonttools font.

        Args:
            font: The fonttools TTFont object

        Raises:
            KeyError: If a required table is missing
        """
        self._font = font
        self._units_per_em = int(font["head"].unitsPerEm)  # type: ignore[attr-defined]
        hhea = font["hhea"]
        self._ascender = int(hhea.ascent)  # type: ignore[attr-defined]
        self._descender = int(hhea.descent)  # type: ignore[attr-defined]
        self._metrics: dict[str, tuple[int, int]] = font["hmtx"].metrics  # type: ignore[attr-defined]
        self._cmap: dict[int, str] = font.getBestCmap() or {}
        self._glyph_set = font.getGlyphSet()
        self._notdef = font.getGlyphOrder()[0] if font.getGlyphOrder() else NOTDEF

    @classmethod
    def from_bytes(cls, data: bytes, origin: str = "buffer") -> "ParsedFont":
        """Parse raw TTF/OTF bytes.

        Args:
            data: The font file contents
            origin: Description of where the bytes came from, for errors

        Returns:
            ParsedFont instance

        Raises:
            FontParseError: If the bytes are not a usable font
        """
        try:
            return cls(TTFont(BytesIO(data)))
        except Exception as e:
            raise FontParseError(origin, str(e) or type(e).__name__) from e

    @property
    def units_per_em(self) -> int:
        """Size of the em square in font units (commonly 1000 or 2048)."""
        return self._units_per_em

    @property
    def ascender(self) -> int:
        """Typographic ascender from the hhea table, in font units."""
        return self._ascender

    @property
    def descender(self) -> int:
        """Typographic descender from the hhea table, in font units (usually negative)."""
        return self._descender

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF outlines, 'TrueType' otherwise."""
        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def glyph_count(self) -> int:
        return len(self._font.getGlyphOrder())

    @property
    def family_name(self) -> str | None:
        """Family name from the name table, if present."""
        if "name" not in self._font:
            return None
        name_table = self._font["name"]
        for name_id in (NAME_ID_TYPOGRAPHIC_FAMILY, NAME_ID_FAMILY):
            record = name_table.getDebugName(name_id)  # type: ignore[attr-defined]
            if record:
                return str(record)
        return None

    def glyph_for_char(self, char: str) -> Glyph:
        """Look up the glyph for one character, falling back to .notdef."""
        code_point = ord(char)
        name = self._cmap.get(code_point)
        if name is None:
            return self._make_glyph(self._notdef, None)
        return self._make_glyph(name, code_point)

    def _make_glyph(self, name: str, code_point: int | None) -> Glyph:
        advance_width, lsb = self._metrics.get(name, (0, 0))
        return Glyph(
            name=name,
            unicode=code_point,
            advance_width=advance_width,
            left_side_bearing=lsb,
        )

    def string_to_glyphs(self, text: str) -> list[Glyph]:
        """Map each character of ``text`` to a glyph, one-to-one."""
        return [self.glyph_for_char(char) for char in text]

    def get_glyph_path(self, glyph: Glyph, x: float, y: float, size: float) -> list[PathCommand]:
        """Outline of one glyph with its origin at (x, y), scaled to ``size`` pixels.

        Font units are y-up; output is y-down, so y is negated.
        """
        scale = size / self._units_per_em
        pen = PathCommandPen(self._glyph_set)
        self._glyph_set[glyph.name].draw(TransformPen(pen, (scale, 0, 0, -scale, x, y)))
        return pen.commands

    def get_path(self, text: str, x: float, y: float, size: float) -> list[PathCommand]:
        """Outline of ``text`` with the baseline origin at (x, y).

        Glyphs are placed one after another by advance width, no kerning.

        Args:
            text: String to lay out
            x: X of the left end of the baseline, in pixels
            y: Y of the baseline, in pixels
            size: Font size in pixels

        Returns:
            Path commands for every contour of every glyph, in order
        """
        scale = size / self._units_per_em
        commands: list[PathCommand] = []
        for glyph in self.string_to_glyphs(text):
            try:
                commands.extend(self.get_glyph_path(glyph, x, y, size))
            except Exception as e:
                # Damaged outline: keep the advance, drop the shape
                logger.warning("Glyph outline could not be drawn", glyph=glyph.name, error=str(e))
            x += glyph.advance_width * scale
        return commands

    def close(self) -> None:
        """Close the underlying font and free resources."""
        self._font.close()
