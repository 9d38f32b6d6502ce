"""Coordinate normalization.

Rescales every point of a shape collection relative to the global bounding
box and truncates the result to a fixed number of decimal digits.

Both axes are divided by the vertical extent of the box, so y spans exactly
[0, 1] while x spans [0, width / height].
"""

import math

from textpaths.config import NormalizationConfig
from textpaths.domain import BoundingBox, Point, ShapeCollection
from textpaths.exceptions import NumericError


def quantize(value: float, factor: int = 1000) -> float:
    """Truncate value toward zero to 1/factor steps.

    Examples:
        >>> quantize(0.12345)
        0.123
        >>> quantize(1.0)
        1.0
    """
    return math.trunc(value * factor) / factor


class CoordinateNormalizer:
    """Maps points into the space defined by a global bounding box.

    Example:
        normalizer = CoordinateNormalizer(bbox)
        normalized = normalizer.normalize(shapes)
    """

    def __init__(self, bbox: BoundingBox, config: NormalizationConfig | None = None) -> None:
        """Initialize the normalizer.

        Args:
            bbox: Global bounding box of the collection
            config: Quantization settings (defaults to 3 decimal digits)

        Raises:
            NumericError: If the box has no vertical extent
        """
        self.bbox = bbox
        self.config = config or NormalizationConfig()
        self._denom = bbox.height
        if not self._denom > 0:
            raise NumericError(
                f"Cannot normalize geometry with vertical extent {self._denom}"
            )

    def normalize_point(self, point: Point) -> Point:
        """Rescale and quantize one point."""
        factor = self.config.quantization_factor
        x = (point.x - self.bbox.min.x) / self._denom
        y = (point.y - self.bbox.min.y) / self._denom
        return Point(quantize(x, factor), quantize(y, factor))

    def normalize(self, shapes: ShapeCollection) -> ShapeCollection:
        """Return a new collection with every point normalized."""
        return shapes.map_points(self.normalize_point)


def normalize_shapes(
    shapes: ShapeCollection,
    bbox: BoundingBox,
    config: NormalizationConfig | None = None,
) -> ShapeCollection:
    """Normalize a collection against its global bounding box.

    Args:
        shapes: Collection to rescale
        bbox: Global bounding box of the collection
        config: Quantization settings

    Returns:
        New collection with identical structure and rescaled points

    Raises:
        NumericError: If the box has no vertical extent
    """
    return CoordinateNormalizer(bbox, config).normalize(shapes)
