"""Path command types for glyph outlines.

This module defines the path-command protocol that sits between glyph
geometry and a drawing surface:
- MoveTo: Start a new contour
- LineTo: Straight segment
- QuadraticCurveTo: Quadratic Bezier segment (TrueType outlines)
- CubicCurveTo: Cubic Bezier segment (PostScript/CFF outlines)
- ClosePath: End of a contour

All coordinates are in output (pixel) units, y axis pointing down.
"""

from dataclasses import dataclass
from typing import Any, ClassVar


def _fmt(value: float) -> str:
    """Format a coordinate compactly for SVG path data."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Move the pen to (x, y), starting a new contour."""

    kind: ClassVar[str] = "M"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "x": self.x, "y": self.y}

    def to_svg(self) -> str:
        return f"M{_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the current point to (x, y)."""

    kind: ClassVar[str] = "L"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "x": self.x, "y": self.y}

    def to_svg(self) -> str:
        return f"L{_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """Quadratic Bezier curve with control point (cx, cy) ending at (x, y)."""

    kind: ClassVar[str] = "Q"

    cx: float
    cy: float
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "x1": self.cx, "y1": self.cy, "x": self.x, "y": self.y}

    def to_svg(self) -> str:
        return f"Q{_fmt(self.cx)} {_fmt(self.cy)} {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier curve with control points (c1x, c1y), (c2x, c2y) ending at (x, y)."""

    kind: ClassVar[str] = "C"

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "x1": self.c1x,
            "y1": self.c1y,
            "x2": self.c2x,
            "y2": self.c2y,
            "x": self.x,
            "y": self.y,
        }

    def to_svg(self) -> str:
        return (
            f"C{_fmt(self.c1x)} {_fmt(self.c1y)} {_fmt(self.c2x)} {_fmt(self.c2y)} "
            f"{_fmt(self.x)} {_fmt(self.y)}"
        )


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current contour."""

    kind: ClassVar[str] = "Z"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind}

    def to_svg(self) -> str:
        return "Z"


PathCommand = MoveTo | LineTo | QuadraticCurveTo | CubicCurveTo | ClosePath


def commands_to_svg(commands: list[PathCommand]) -> str:
    """Join path commands into SVG path data (the ``d`` attribute)."""
    return " ".join(command.to_svg() for command in commands)
