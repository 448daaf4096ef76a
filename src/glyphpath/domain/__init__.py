"""Domain models for glyphpath.

This module contains the core domain models: path commands, glyphs, text
metrics and alignment modes, and the drawing surface contract. All models
are independent of fonttools implementation details.

Key classes:
- MoveTo, LineTo, QuadraticCurveTo, CubicCurveTo, ClosePath: Path commands
- Glyph: A character resolved against a font
- TextMetrics: Measured width, ascent and descent of a string
- FontSpec: Family and size selected on a text context
- DrawingSurface: Protocol a canvas-like target implements
- RecordingSurface: DrawingSurface that records calls as data
"""

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    commands_to_svg,
)
from glyphpath.domain.glyph import Glyph
from glyphpath.domain.surface import DrawingSurface, PaintedPath, RecordingSurface
from glyphpath.domain.text import (
    PLACEHOLDER_METRICS,
    FontSpec,
    TextAlign,
    TextBaseline,
    TextMetrics,
)

__all__: list[str] = [
    # Enums
    "TextAlign",
    "TextBaseline",
    # Path commands
    "ClosePath",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadraticCurveTo",
    "commands_to_svg",
    # Core types
    "FontSpec",
    "Glyph",
    "PLACEHOLDER_METRICS",
    "TextMetrics",
    # Surfaces
    "DrawingSurface",
    "PaintedPath",
    "RecordingSurface",
]
