"""Font I/O layer for glyphpath.

This module handles reading font sources and parsing them with fonttools.
It provides a clean abstraction layer between fonttools and the
domain models.

Key responsibilities:
- Turn file paths, data URIs and buffers into font bytes (sync and async)
- Parse TTF/OTF bytes and expose metrics and glyph lookup
- Convert glyph outlines into path commands
- Write painted paths as SVG

Key classes:
- ParsedFont: Parsed font with metrics and outline extraction
- PathCommandPen: fonttools pen producing PathCommand objects
- SVGSurface: Drawing surface producing SVG markup
"""

from glyphpath.io.font import ParsedFont
from glyphpath.io.pen import PathCommandPen
from glyphpath.io.source import (
    FontSource,
    SourceKind,
    classify_source,
    decode_data_uri,
    read_source,
    read_source_async,
)
from glyphpath.io.svg import SVGSurface

__all__ = [
    "FontSource",
    "ParsedFont",
    "PathCommandPen",
    "SVGSurface",
    "SourceKind",
    "classify_source",
    "decode_data_uri",
    "read_source",
    "read_source_async",
]
