"""Anchor point to path origin, given text alignment."""

import structlog

from glyphpath.domain.text import TextAlign, TextBaseline, TextMetrics

logger = structlog.get_logger(__name__)


def _coerce(
    value: TextAlign | TextBaseline | str,
    mode: type[TextAlign] | type[TextBaseline],
    default: TextAlign | TextBaseline,
) -> TextAlign | TextBaseline:
    try:
        return mode(value)
    except ValueError:
        logger.warning("Unknown alignment mode, leaving anchor unchanged", mode=value)
        return default


def resolve_origin(
    x: float,
    y: float,
    metrics: TextMetrics,
    h_align: TextAlign | str = TextAlign.START,
    v_align: TextBaseline | str = TextBaseline.ALPHABETIC,
) -> tuple[float, float]:
    """Move the anchor (x, y) to the baseline-left origin of the text path.

    Unknown modes behave as start / alphabetic, so drawing never fails on
    a bad alignment value.

    Args:
        x: Anchor x in pixels
        y: Anchor y in pixels
        metrics: Metrics of the text being placed
        h_align: Horizontal alignment (start/left, end/right, center)
        v_align: Vertical alignment (alphabetic, top, middle, bottom)

    Returns:
        The (x, y) to start the path at
    """
    h_align = _coerce(h_align, TextAlign, TextAlign.START)
    v_align = _coerce(v_align, TextBaseline, TextBaseline.ALPHABETIC)

    if h_align in (TextAlign.END, TextAlign.RIGHT):
        x = x - metrics.width
    elif h_align is TextAlign.CENTER:
        x = x - metrics.width / 2

    if v_align is TextBaseline.TOP:
        y = y + metrics.em_height_ascent
    elif v_align is TextBaseline.MIDDLE:
        y = y + (metrics.em_height_ascent + metrics.em_height_descent) / 2
    elif v_align is TextBaseline.BOTTOM:
        y = y + metrics.em_height_descent

    return x, y
