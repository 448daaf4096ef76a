"""Shared fixtures: small fonts built in memory with fontTools.

TrueType test font (UPM 1000, ascender 800, descender -200):
- .notdef  advance 500, one rectangle
- space    advance 250, no contours
- A        advance 600, one triangle (lines only)
- B        advance 650, one contour with quadratic curves
- O        advance 700, outer square plus inner square (two contours)

CFF test font (same vertical metrics):
- .notdef  advance 500, empty
- C        advance 600, one contour with a cubic curve
"""

from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphpath.fonts import FontRegistry

UPM = 1000
ASCENT = 800
DESCENT = -200


def _rect(pen, x0, y0, x1, y1):
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()


def build_truetype_font() -> bytes:
    """Build the TrueType test font and return its bytes."""
    glyph_order = [".notdef", "space", "A", "B", "O"]

    pen = TTGlyphPen(None)
    _rect(pen, 50, 0, 450, 700)
    notdef = pen.glyph()

    space = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((300, 700))
    pen.lineTo((600, 0))
    pen.closePath()
    glyph_a = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.qCurveTo((550, 700), (550, 350))
    pen.qCurveTo((550, 0), (100, 0))
    pen.closePath()
    glyph_b = pen.glyph()

    pen = TTGlyphPen(None)
    _rect(pen, 50, 0, 650, 700)
    # Counter-wound hole
    pen.moveTo((200, 150))
    pen.lineTo((500, 150))
    pen.lineTo((500, 550))
    pen.lineTo((200, 550))
    pen.closePath()
    glyph_o = pen.glyph()

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x20: "space", ord("A"): "A", ord("B"): "B", ord("O"): "O"})
    fb.setupGlyf({".notdef": notdef, "space": space, "A": glyph_a, "B": glyph_b, "O": glyph_o})
    fb.setupHorizontalMetrics(
        {
            ".notdef": (500, 50),
            "space": (250, 0),
            "A": (600, 0),
            "B": (650, 100),
            "O": (700, 50),
        }
    )
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupNameTable({"familyName": "Test Sans", "styleName": "Regular"})
    fb.setupPost()
    fb.setupMaxp()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


def build_cff_font() -> bytes:
    """Build the CFF test font and return its bytes."""
    notdef_pen = T2CharStringPen(500, None)

    pen = T2CharStringPen(600, None)
    pen.moveTo((100, 0))
    pen.curveTo((100, 400), (500, 400), (500, 0))
    pen.closePath()

    char_strings = {".notdef": notdef_pen.getCharString(), "C": pen.getCharString()}

    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder([".notdef", "C"])
    fb.setupCharacterMap({ord("C"): "C"})
    fb.setupCFF("TestCubic-Regular", {"FullName": "Test Cubic"}, char_strings, {})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "C": (600, 100)})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupNameTable({"familyName": "Test Cubic", "styleName": "Regular"})
    fb.setupPost()
    fb.setupMaxp()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def ttf_bytes() -> bytes:
    """Raw bytes of the TrueType test font."""
    return build_truetype_font()


@pytest.fixture(scope="session")
def otf_bytes() -> bytes:
    """Raw bytes of the CFF test font."""
    return build_cff_font()


@pytest.fixture
def ttf_path(tmp_path: Path, ttf_bytes: bytes) -> Path:
    """The TrueType test font written to a temporary file."""
    path = tmp_path / "TestSans-Regular.ttf"
    path.write_bytes(ttf_bytes)
    return path


@pytest.fixture
def registry(ttf_bytes: bytes) -> FontRegistry:
    """Registry with the TrueType test font loaded as 'Test Sans'."""
    reg = FontRegistry()
    reg.register(ttf_bytes, "Test Sans").load_sync()
    return reg
