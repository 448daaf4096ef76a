"""Pen that records glyph outlines as path commands.

fonttools draws a glyph by calling pen methods. BasePen already splits
multi-point ``qCurveTo`` / ``curveTo`` calls into single segments and
decomposes composite glyphs, so this pen only maps each segment to a
PathCommand.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
)

Pt = tuple[float, float]


class PathCommandPen(BasePen):
    """Collects PathCommand objects from fonttools drawing calls.

    Example:
        pen = PathCommandPen(font.getGlyphSet())
        font.getGlyphSet()["O"].draw(pen)
        pen.commands  # [MoveTo(...), QuadraticCurveTo(...), ..., ClosePath()]
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.commands: list[PathCommand] = []

    def _moveTo(self, pt: Pt) -> None:
        self.commands.append(MoveTo(pt[0], pt[1]))

    def _lineTo(self, pt: Pt) -> None:
        self.commands.append(LineTo(pt[0], pt[1]))

    def _qCurveToOne(self, pt1: Pt, pt2: Pt) -> None:
        self.commands.append(QuadraticCurveTo(pt1[0], pt1[1], pt2[0], pt2[1]))

    def _curveToOne(self, pt1: Pt, pt2: Pt, pt3: Pt) -> None:
        self.commands.append(CubicCurveTo(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1]))

    def _closePath(self) -> None:
        self.commands.append(ClosePath())

    def _endPath(self) -> None:
        # Open contours are left unclosed and therefore never painted.
        pass
