"""Bounding box aggregation.

Computes per-shape bounding boxes from every endpoint and control point, then
folds them into one global box covering the whole collection.
"""

import math
from collections.abc import Iterable

from textpaths.domain import BoundingBox, Point, Shape
from textpaths.exceptions import EmptyInputError, NumericError


def _check_finite(point: Point) -> None:
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise NumericError(f"Unable to order non-finite coordinate ({point.x}, {point.y})")


def points_bounding_box(points: Iterable[Point]) -> BoundingBox:
    """Calculate the bounding box of a set of points.

    Args:
        points: Points to cover (duplicates allowed)

    Returns:
        Smallest axis-aligned box holding every point

    Raises:
        EmptyInputError: If there are no points
        NumericError: If any coordinate is NaN or infinite

    Examples:
        >>> points_bounding_box([Point(10, 20), Point(100, 30), Point(50, 150)]).to_tuple()
        (10, 20, 100, 150)
    """
    iterator = iter(points)
    first = next(iterator, None)
    if first is None:
        raise EmptyInputError("No points found for bounding box")

    _check_finite(first)
    min_x = max_x = first.x
    min_y = max_y = first.y

    for point in iterator:
        _check_finite(point)
        min_x = min(min_x, point.x)
        max_x = max(max_x, point.x)
        min_y = min(min_y, point.y)
        max_y = max(max_y, point.y)

    return BoundingBox(min=Point(min_x, min_y), max=Point(max_x, max_y))


def shape_bounding_box(shape: Shape) -> BoundingBox:
    """Calculate the bounding box of one shape.

    Control points are included, so the box may be larger than the drawn
    outline.

    Args:
        shape: Shape to measure

    Returns:
        Bounding box of every point of every primitive

    Raises:
        EmptyInputError: If the shape has no primitives
        NumericError: If any coordinate is NaN or infinite
    """
    if shape.is_empty():
        raise EmptyInputError("Shape has no primitives")
    return points_bounding_box(shape.points())


def global_bounding_box(shapes: Iterable[Shape]) -> BoundingBox:
    """Fold every shape's bounding box into one global box.

    Args:
        shapes: Shapes in any order

    Returns:
        Bounding box covering every shape

    Raises:
        EmptyInputError: If there are no shapes
        NumericError: If any coordinate is NaN or infinite
    """
    iterator = iter(shapes)
    first = next(iterator, None)
    if first is None:
        raise EmptyInputError("Geometry has no shapes")

    bbox = shape_bounding_box(first)
    for shape in iterator:
        bbox = bbox.union(shape_bounding_box(shape))

    return bbox
