"""Glyph outline emission onto a drawing surface.

Each contour is closed and painted on its own: ``close_path``, then
``fill`` or ``stroke``, then ``begin_path`` for the next contour. Holes
such as the counter of "O" are separate contours, so how they combine is
left to the surface's own fill rule.
"""

import structlog

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)
from glyphpath.domain.surface import DrawingSurface
from glyphpath.fonts.resource import FontResource

logger = structlog.get_logger(__name__)


def draw_commands(commands: list[PathCommand], fill: bool, surface: DrawingSurface) -> int:
    """Play path commands onto ``surface``.

    Args:
        commands: Path commands in drawing order
        fill: Fill each closed contour if True, stroke it otherwise
        surface: Target drawing surface

    Returns:
        Number of contours painted
    """
    painted = 0
    surface.begin_path()
    for command in commands:
        if isinstance(command, MoveTo):
            surface.move_to(command.x, command.y)
        elif isinstance(command, QuadraticCurveTo):
            surface.quadratic_curve_to(command.cx, command.cy, command.x, command.y)
        elif isinstance(command, LineTo):
            surface.line_to(command.x, command.y)
        elif isinstance(command, CubicCurveTo):
            surface.bezier_curve_to(
                command.c1x, command.c1y, command.c2x, command.c2y, command.x, command.y
            )
        elif isinstance(command, ClosePath):
            surface.close_path()
            if fill:
                surface.fill()
            else:
                surface.stroke()
            surface.begin_path()
            painted += 1
    return painted


def emit_path(
    resource: FontResource | None,
    text: str,
    x: float,
    y: float,
    size: float,
    fill: bool,
    surface: DrawingSurface,
) -> int:
    """Draw the outline of ``text`` with its baseline origin at (x, y).

    Does nothing but log a warning if the font is missing or not loaded.

    Args:
        resource: Font to draw with
        text: String to draw
        x: Baseline-left x in pixels
        y: Baseline y in pixels
        size: Font size in pixels
        fill: Fill contours if True, stroke them otherwise
        surface: Target drawing surface

    Returns:
        Number of contours painted
    """
    if resource is None:
        logger.warning("No font available to draw with", text=text)
        return 0

    font = resource.font
    if font is None:
        logger.warning("Font not loaded yet, skipping draw", family=resource.family)
        return 0

    commands = font.get_path(text, x, y, size)
    painted = draw_commands(commands, fill, surface)
    logger.debug(
        "Text path emitted",
        family=resource.family,
        commands=len(commands),
        contours=painted,
    )
    return painted
