"""glyphpath - Turn font glyph outlines into canvas path commands.

glyphpath keeps a registry of fonts by family name, measures strings
(advance width, ascent, descent) and walks glyph outlines as a stream of
moveTo / lineTo / quadraticCurveTo / bezierCurveTo / closePath calls against
any canvas-like drawing surface.

Example:
    registry = FontRegistry()
    registry.register("Roboto-Regular.ttf", "Roboto").load_sync()

    ctx = TextContext(surface, registry)
    ctx.font = FontSpec("Roboto", 16)
    ctx.fill_text("Hello", 10, 40)
"""

from glyphpath.core import TextContext, emit_path, measure, render_text, resolve_origin
from glyphpath.domain import FontSpec, TextAlign, TextBaseline, TextMetrics
from glyphpath.fonts import FontRegistry, FontResource, LoadState

__version__ = "0.1.0"

__all__ = [
    "FontRegistry",
    "FontResource",
    "FontSpec",
    "LoadState",
    "TextAlign",
    "TextBaseline",
    "TextContext",
    "TextMetrics",
    "__version__",
    "emit_path",
    "measure",
    "render_text",
    "resolve_origin",
]
