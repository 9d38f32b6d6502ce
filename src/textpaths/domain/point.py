"""Core geometric value types.

This module defines the fundamental geometric types used throughout textpaths:
- Point: An immutable 2D point
- BoundingBox: An axis-aligned box described by its min and max corners
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Points are combined component-wise, never
    mutated in place.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_list(self) -> list[float]:
        """Serialize to a ``[x, y]`` pair."""
        return [self.x, self.y]

    @classmethod
    def from_list(cls, data: list[float] | tuple[float, float]) -> "Point":
        """Deserialize from a ``[x, y]`` pair.

        Args:
            data: Sequence holding exactly two coordinates

        Returns:
            Point instance

        Raises:
            ValueError: If data does not hold exactly two values
        """
        if len(data) != 2:
            raise ValueError(f"Expected [x, y] pair, got {data!r}")
        return cls(x=float(data[0]), y=float(data[1]))

    def translate(self, dx: float, dy: float) -> "Point":
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def min(self, other: "Point") -> "Point":
        """Component-wise minimum of two points."""
        return Point(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Point") -> "Point":
        """Component-wise maximum of two points."""
        return Point(max(self.x, other.x), max(self.y, other.y))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min: Corner with the smallest x and y
        max: Corner with the largest x and y
    """

    min: Point
    max: Point

    @property
    def height(self) -> float:
        """Vertical extent."""
        return self.max.y - self.min.y

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(min=self.min.min(other.min), max=self.max.max(other.max))

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min.x, self.min.y, self.max.x, self.max.y)
