"""SVG output surface.

This module provides the SVGSurface class, a DrawingSurface that turns
every filled or stroked contour into an SVG ``<path>`` element and can
write the result as a standalone SVG document.
"""

from dataclasses import astuple
from pathlib import Path
from xml.sax.saxutils import quoteattr

from glyphpath.config.settings import SVGConfig
from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    commands_to_svg,
)


class SVGSurface:
    """Drawing surface that renders to SVG markup.

    Example:
        surface = SVGSurface()
        ctx = TextContext(surface, registry)
        ctx.fill_text("Hi", 0, 20)
        surface.save(Path("hi.svg"))
    """

    def __init__(self, config: SVGConfig | None = None) -> None:
        self._config = config or SVGConfig()
        self._current: list[PathCommand] = []
        self._elements: list[tuple[str, bool]] = []
        self._points: list[tuple[float, float]] = []

    @property
    def path_count(self) -> int:
        """Number of painted paths so far."""
        return len(self._elements)

    def begin_path(self) -> None:
        self._current = []

    def move_to(self, x: float, y: float) -> None:
        self._add(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._add(LineTo(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._add(QuadraticCurveTo(cx, cy, x, y))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._add(CubicCurveTo(c1x, c1y, c2x, c2y, x, y))

    def close_path(self) -> None:
        self._current.append(ClosePath())

    def fill(self) -> None:
        self._paint(filled=True)

    def stroke(self) -> None:
        self._paint(filled=False)

    def _add(self, command: MoveTo | LineTo | QuadraticCurveTo | CubicCurveTo) -> None:
        self._current.append(command)
        # Control points are included, so the box may be slightly loose.
        values = astuple(command)
        self._points.extend(zip(values[0::2], values[1::2], strict=True))

    def _paint(self, filled: bool) -> None:
        if self._current:
            self._elements.append((commands_to_svg(self._current), filled))

    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box of everything drawn.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), all zero if nothing was drawn
        """
        if not self._points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p[0] for p in self._points]
        ys = [p[1] for p in self._points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_svg(self) -> str:
        """Render the painted paths as an SVG document."""
        cfg = self._config
        min_x, min_y, max_x, max_y = self.bounds()
        pad = cfg.padding
        width = max_x - min_x + 2 * pad
        height = max_y - min_y + 2 * pad
        view_box = f"{min_x - pad:g} {min_y - pad:g} {width:g} {height:g}"

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" '
            f'height="{height:g}" viewBox="{view_box}">',
        ]
        for data, filled in self._elements:
            if filled:
                style = f"fill={quoteattr(cfg.fill_color)}"
            else:
                style = (
                    f'fill="none" stroke={quoteattr(cfg.stroke_color)} '
                    f'stroke-width="{cfg.stroke_width:g}"'
                )
            lines.append(f"  <path d={quoteattr(data)} {style}/>")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self, output_path: Path) -> None:
        """Write the SVG document to ``output_path``.

        Raises:
            OSError: If file cannot be written
        """
        output_path.write_text(self.to_svg(), encoding="utf-8")
