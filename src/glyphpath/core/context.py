"""Text drawing context.

TextContext is the canvas-like front end: it holds the current font and
alignment, and turns fill_text / stroke_text / measure_text calls into
registry lookups, measurement, alignment and outline emission.
"""

import structlog

from glyphpath.config.settings import GlyphPathSettings, get_default_settings
from glyphpath.core.alignment import resolve_origin
from glyphpath.core.emitter import emit_path
from glyphpath.core.metrics import measure
from glyphpath.domain.surface import DrawingSurface
from glyphpath.domain.text import FontSpec, TextAlign, TextBaseline, TextMetrics
from glyphpath.fonts.registry import FontRegistry

logger = structlog.get_logger(__name__)


def render_text(
    registry: FontRegistry,
    surface: DrawingSurface,
    font: FontSpec,
    text: str,
    x: float,
    y: float,
    fill: bool,
    h_align: TextAlign | str = TextAlign.START,
    v_align: TextBaseline | str = TextBaseline.ALPHABETIC,
) -> int:
    """Measure, align and draw ``text`` anchored at (x, y).

    Args:
        registry: Where to look up ``font.family``
        surface: Target drawing surface
        font: Family and pixel size to draw with
        text: String to draw
        x: Anchor x in pixels
        y: Anchor y in pixels
        fill: Fill if True, stroke otherwise
        h_align: Horizontal alignment relative to the anchor
        v_align: Vertical alignment relative to the anchor

    Returns:
        Number of contours painted (0 if no usable font)
    """
    resource = registry.resolve(font.family)
    if resource is None:
        logger.warning("Font missing", family=font.family, size=font.size)
        return 0

    metrics = measure(resource, text, font.size)
    origin_x, origin_y = resolve_origin(x, y, metrics, h_align, v_align)
    return emit_path(resource, text, origin_x, origin_y, font.size, fill, surface)


class TextContext:
    """Canvas-style text API over a drawing surface and a font registry.

    Example:
        ctx = TextContext(surface, registry)
        ctx.font = FontSpec("Inter", 24)
        ctx.text_align = TextAlign.CENTER
        ctx.fill_text("Title", 200, 40)
    """

    def __init__(
        self,
        surface: DrawingSurface,
        registry: FontRegistry,
        settings: GlyphPathSettings | None = None,
    ) -> None:
        text_config = (settings or get_default_settings()).text
        self.surface = surface
        self.registry = registry
        self.font = FontSpec(text_config.default_family, text_config.default_size)
        self.text_align: TextAlign | str = text_config.text_align
        self.text_baseline: TextBaseline | str = text_config.text_baseline

    def measure_text(self, text: str) -> TextMetrics:
        """Measure ``text`` in the current font."""
        return measure(self.registry.resolve(self.font.family), text, self.font.size)

    def fill_text(self, text: str, x: float, y: float) -> int:
        """Fill ``text`` anchored at (x, y) using the current font and alignment."""
        return self._draw(text, x, y, fill=True)

    def stroke_text(self, text: str, x: float, y: float) -> int:
        """Stroke ``text`` anchored at (x, y) using the current font and alignment."""
        return self._draw(text, x, y, fill=False)

    def _draw(self, text: str, x: float, y: float, fill: bool) -> int:
        return render_text(
            self.registry,
            self.surface,
            self.font,
            text,
            x,
            y,
            fill,
            self.text_align,
            self.text_baseline,
        )
