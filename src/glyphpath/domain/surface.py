"""Drawing surface contract.

A drawing surface is anything canvas-like that can build and paint a path.
glyphpath never rasterizes; it only calls these methods in order.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)


@runtime_checkable
class DrawingSurface(Protocol):
    """Canvas-like target for path commands."""

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


@dataclass
class PaintedPath:
    """A path that was filled or stroked on a RecordingSurface."""

    commands: list[PathCommand]
    filled: bool


@dataclass
class RecordingSurface:
    """Surface that records calls instead of drawing.

    Every call is appended to ``calls`` by method name; path geometry is
    collected as PathCommand objects and moved to ``painted`` on each
    ``fill()`` or ``stroke()``.
    """

    calls: list[str] = field(default_factory=list)
    current: list[PathCommand] = field(default_factory=list)
    painted: list[PaintedPath] = field(default_factory=list)

    def begin_path(self) -> None:
        self.calls.append("begin_path")
        self.current = []

    def move_to(self, x: float, y: float) -> None:
        self.calls.append("move_to")
        self.current.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append("line_to")
        self.current.append(LineTo(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self.calls.append("quadratic_curve_to")
        self.current.append(QuadraticCurveTo(cx, cy, x, y))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self.calls.append("bezier_curve_to")
        self.current.append(CubicCurveTo(c1x, c1y, c2x, c2y, x, y))

    def close_path(self) -> None:
        self.calls.append("close_path")
        self.current.append(ClosePath())

    def fill(self) -> None:
        self.calls.append("fill")
        self.painted.append(PaintedPath(commands=list(self.current), filled=True))

    def stroke(self) -> None:
        self.calls.append("stroke")
        self.painted.append(PaintedPath(commands=list(self.current), filled=False))
