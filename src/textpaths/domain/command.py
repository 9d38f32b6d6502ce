"""Drawing commands produced by a glyph outline source.

Commands describe an outline the way a pen draws it:
- MoveTo: start a new subpath
- LineTo: straight segment to a point
- QuadTo: quadratic curve through one control point
- CurveTo: cubic curve through two control points
- Close: close the current subpath
"""

from dataclasses import dataclass
from typing import TypeAlias

from textpaths.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    point: Point

    def translate(self, dx: float, dy: float) -> "MoveTo":
        return MoveTo(self.point.translate(dx, dy))


@dataclass(frozen=True, slots=True)
class LineTo:
    point: Point

    def translate(self, dx: float, dy: float) -> "LineTo":
        return LineTo(self.point.translate(dx, dy))


@dataclass(frozen=True, slots=True)
class QuadTo:
    control: Point
    point: Point

    def translate(self, dx: float, dy: float) -> "QuadTo":
        return QuadTo(self.control.translate(dx, dy), self.point.translate(dx, dy))


@dataclass(frozen=True, slots=True)
class CurveTo:
    control0: Point
    control1: Point
    point: Point

    def translate(self, dx: float, dy: float) -> "CurveTo":
        return CurveTo(
            self.control0.translate(dx, dy),
            self.control1.translate(dx, dy),
            self.point.translate(dx, dy),
        )


@dataclass(frozen=True, slots=True)
class Close:
    def translate(self, dx: float, dy: float) -> "Close":  # noqa: ARG002
        return self


DrawCommand: TypeAlias = MoveTo | LineTo | QuadTo | CurveTo | Close
