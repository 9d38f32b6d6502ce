"""Path primitives.

A primitive is one path segment. Three variants exist:
- Line: straight segment between two points
- Quadratic: quadratic Bezier with one control point
- Bezier: cubic Bezier with two control points

Each variant serializes as a single-key dictionary whose key is the variant
name and whose value is the list of its points as ``[x, y]`` pairs.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from textpaths.domain.point import Point


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from p0 to p1."""

    kind: ClassVar[str] = "Line"

    p0: Point
    p1: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    def map_points(self, fn: Callable[[Point], Point]) -> "Line":
        """Return a new Line with fn applied to every point."""
        return Line(fn(self.p0), fn(self.p1))


@dataclass(frozen=True, slots=True)
class Quadratic:
    """Quadratic Bezier from p0 to p1 through one control point."""

    kind: ClassVar[str] = "Quadratic"

    p0: Point
    control: Point
    p1: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.control, self.p1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    def map_points(self, fn: Callable[[Point], Point]) -> "Quadratic":
        """Return a new Quadratic with fn applied to every point."""
        return Quadratic(fn(self.p0), fn(self.control), fn(self.p1))


@dataclass(frozen=True, slots=True)
class Bezier:
    """Cubic Bezier from p0 to p1 through two control points."""

    kind: ClassVar[str] = "Bezier"

    p0: Point
    control0: Point
    control1: Point
    p1: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.control0, self.control1, self.p1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    def map_points(self, fn: Callable[[Point], Point]) -> "Bezier":
        """Return a new Bezier with fn applied to every point."""
        return Bezier(fn(self.p0), fn(self.control0), fn(self.control1), fn(self.p1))


Primitive: TypeAlias = Line | Quadratic | Bezier

PRIMITIVE_TYPES: dict[str, type[Line] | type[Quadratic] | type[Bezier]] = {
    "Line": Line,
    "Quadratic": Quadratic,
    "Bezier": Bezier,
}

# Number of points carried by each variant
POINT_COUNTS: dict[str, int] = {"Line": 2, "Quadratic": 3, "Bezier": 4}


def primitive_to_dict(primitive: Primitive) -> dict[str, Any]:
    """Serialize a primitive to ``{kind: [[x, y], ...]}``.

    Args:
        primitive: Any primitive variant

    Returns:
        Single-key dictionary
    """
    return {primitive.kind: [p.to_list() for p in primitive.points]}


def primitive_from_dict(data: dict[str, Any]) -> Primitive:
    """Deserialize a primitive from ``{kind: [[x, y], ...]}``.

    Args:
        data: Single-key dictionary produced by primitive_to_dict

    Returns:
        Primitive of the tagged variant

    Raises:
        ValueError: If the tag is unknown or the point count is wrong
    """
    if len(data) != 1:
        raise ValueError(f"Primitive must have exactly one tag, got {sorted(data)}")

    (kind, raw_points), = data.items()
    if kind not in PRIMITIVE_TYPES:
        raise ValueError(f"Unknown primitive kind: {kind!r}")

    if len(raw_points) != POINT_COUNTS[kind]:
        raise ValueError(
            f"{kind} expects {POINT_COUNTS[kind]} points, got {len(raw_points)}"
        )

    points = [Point.from_list(p) for p in raw_points]
    return PRIMITIVE_TYPES[kind](*points)
