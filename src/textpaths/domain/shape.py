"""Shape and shape collection.

A Shape is the full outline of one glyph as an ordered list of primitives,
possibly holding several subpaths one after another. A ShapeCollection holds
one Shape per glyph that produced geometry, in layout order, and is both the
unit of aggregation and the unit of serialization.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from textpaths.domain.point import Point
from textpaths.domain.primitive import Primitive, primitive_from_dict, primitive_to_dict


@dataclass(frozen=True)
class Shape:
    """Outline of a single glyph.

    Attributes:
        primitives: Path segments in drawing order
    """

    primitives: tuple[Primitive, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable while keeping the stored value immutable
        object.__setattr__(self, "primitives", tuple(self.primitives))

    def is_empty(self) -> bool:
        """Check if the shape has no primitives."""
        return len(self.primitives) == 0

    def points(self) -> list[Point]:
        """Every point referenced by every primitive, duplicates included."""
        return [point for primitive in self.primitives for point in primitive.points]

    def map_points(self, fn: Callable[[Point], Point]) -> "Shape":
        """Return a new shape with identical structure and fn applied to every point."""
        return Shape(tuple(primitive.map_points(fn) for primitive in self.primitives))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{"primitives": [...]}``."""
        return {"primitives": [primitive_to_dict(p) for p in self.primitives]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize from ``{"primitives": [...]}``.

        Args:
            data: Dictionary representation of a shape

        Returns:
            Shape instance
        """
        return cls(tuple(primitive_from_dict(p) for p in data["primitives"]))


@dataclass
class ShapeCollection:
    """Ordered collection of shapes, one per glyph with geometry.

    Attributes:
        shapes: Shapes in layout order
    """

    shapes: list[Shape] = field(default_factory=list)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def __getitem__(self, index: int) -> Shape:
        return self.shapes[index]

    def append(self, shape: Shape) -> None:
        """Add a shape at the end of the collection."""
        self.shapes.append(shape)

    @property
    def primitive_count(self) -> int:
        """Total number of primitives across all shapes."""
        return sum(len(shape.primitives) for shape in self.shapes)

    def map_points(self, fn: Callable[[Point], Point]) -> "ShapeCollection":
        """Return a new collection with fn applied to every point of every shape."""
        return ShapeCollection([shape.map_points(fn) for shape in self.shapes])

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize to the JSON document layout (array of shapes)."""
        return [shape.to_dict() for shape in self.shapes]

    @classmethod
    def from_list(cls, data: Iterable[dict[str, Any]]) -> "ShapeCollection":
        """Deserialize from the JSON document layout.

        Args:
            data: Array of shape dictionaries

        Returns:
            ShapeCollection instance
        """
        return cls([Shape.from_dict(s) for s in data])
