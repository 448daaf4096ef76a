"""Core text pipeline for glyphpath.

This module turns text into painted outlines:

1. Resolve the font family in a FontRegistry
2. measure: sum advance widths, scale ascender/descender
3. resolve_origin: shift the anchor point for the alignment modes
4. emit_path: walk glyph outlines onto a DrawingSurface, painting each contour

Key classes and functions:
- TextContext: Canvas-style fill_text / stroke_text / measure_text
- render_text: Whole pipeline for one string
- measure, resolve_origin, emit_path, draw_commands: The individual steps
"""

from glyphpath.core.alignment import resolve_origin
from glyphpath.core.context import TextContext, render_text
from glyphpath.core.emitter import draw_commands, emit_path
from glyphpath.core.metrics import measure

__all__ = [
    "TextContext",
    "draw_commands",
    "emit_path",
    "measure",
    "render_text",
    "resolve_origin",
]
