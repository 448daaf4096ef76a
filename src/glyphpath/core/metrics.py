"""Text measurement."""

import structlog

from glyphpath.domain.text import PLACEHOLDER_METRICS, TextMetrics
from glyphpath.fonts.resource import FontResource

logger = structlog.get_logger(__name__)


def measure(resource: FontResource | None, text: str, size: float) -> TextMetrics:
    """Measure ``text`` set in ``resource`` at ``size`` pixels.

    Width is the plain sum of glyph advance widths (no kerning or
    ligatures). Ascent and descent come from the font header, not from the
    glyphs in ``text``. Everything scales linearly:
    ``value / units_per_em * size``.

    If there is no font, or it is not loaded, a warning is logged and
    PLACEHOLDER_METRICS is returned instead of raising.

    Args:
        resource: Font to measure with (None if nothing could be resolved)
        text: String to measure
        size: Font size in pixels

    Returns:
        TextMetrics in pixels
    """
    if resource is None:
        logger.warning("No font available to measure with", text=text)
        return PLACEHOLDER_METRICS

    font = resource.font
    if font is None:
        logger.warning("Font not loaded, using placeholder metrics", family=resource.family)
        return PLACEHOLDER_METRICS

    advance = sum(glyph.advance_width for glyph in font.string_to_glyphs(text))
    upm = font.units_per_em

    return TextMetrics(
        width=advance / upm * size,
        em_height_ascent=font.ascender / upm * size,
        em_height_descent=font.descender / upm * size,
    )
