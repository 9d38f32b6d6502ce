"""Unit tests for coordinate normalization."""

import pytest

from textpaths.config import NormalizationConfig
from textpaths.core.bounds import global_bounding_box
from textpaths.core.normalizer import CoordinateNormalizer, normalize_shapes, quantize
from textpaths.domain import Bezier, BoundingBox, Line, Point, Quadratic, Shape, ShapeCollection
from textpaths.exceptions import NumericError


class TestQuantize:
    """Tests for quantize."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.12345, 0.123),
            (0.9999, 0.999),
            (1.0, 1.0),
            (0.0, 0.0),
            (2.5, 2.5),
        ],
    )
    def test_truncates_to_three_digits(self, value: float, expected: float) -> None:
        """Test values are truncated, never rounded up."""
        assert quantize(value) == expected

    def test_custom_factor(self) -> None:
        """Test a different quantization step."""
        assert quantize(0.5678, 100) == 0.56


class TestCoordinateNormalizer:
    """Tests for CoordinateNormalizer."""

    @pytest.fixture
    def triangle(self) -> ShapeCollection:
        """Collection holding one triangle from (0, 0) to (10, 10)."""
        return ShapeCollection(
            [
                Shape(
                    [
                        Line(Point(0, 0), Point(10, 0)),
                        Line(Point(10, 0), Point(5, 10)),
                        Line(Point(5, 10), Point(0, 0)),
                    ]
                )
            ]
        )

    def test_triangle(self, triangle: ShapeCollection) -> None:
        """Test the triangle maps into the unit square."""
        bbox = global_bounding_box(triangle)
        normalized = normalize_shapes(triangle, bbox)

        assert normalized[0].primitives == (
            Line(Point(0.0, 0.0), Point(1.0, 0.0)),
            Line(Point(1.0, 0.0), Point(0.5, 1.0)),
            Line(Point(0.5, 1.0), Point(0.0, 0.0)),
        )

    def test_y_extremes_map_to_zero_and_one(self) -> None:
        """Test points at min y and max y map to 0 and 1."""
        shapes = ShapeCollection(
            [
                Shape([Quadratic(Point(3, 17), Point(8, 42), Point(13, 17))]),
                Shape([Line(Point(20, 29), Point(25, 30))]),
            ]
        )
        normalized = normalize_shapes(shapes, global_bounding_box(shapes))
        ys = [p.y for shape in normalized for p in shape.points()]

        assert min(ys) == 0.0
        assert max(ys) == 1.0

    def test_x_scaled_by_height(self) -> None:
        """Test x uses the vertical extent, so wide text exceeds 1."""
        shapes = ShapeCollection([Shape([Line(Point(0, 0), Point(20, 10))])])
        normalized = normalize_shapes(shapes, global_bounding_box(shapes))

        assert normalized[0].primitives[0].end == Point(2.0, 1.0)

    def test_offset_origin(self) -> None:
        """Test coordinates are relative to the box minimum."""
        bbox = BoundingBox(Point(100, 50), Point(140, 58))
        normalizer = CoordinateNormalizer(bbox)

        assert normalizer.normalize_point(Point(102, 52)) == Point(0.25, 0.25)

    def test_structure_preserved(self) -> None:
        """Test variants, point counts and order survive normalization."""
        shapes = ShapeCollection(
            [
                Shape(
                    [
                        Line(Point(0, 0), Point(4, 0)),
                        Quadratic(Point(4, 0), Point(6, 2), Point(4, 4)),
                        Bezier(Point(4, 4), Point(3, 5), Point(1, 5), Point(0, 4)),
                    ]
                )
            ]
        )
        normalized = normalize_shapes(shapes, global_bounding_box(shapes))

        assert [type(p) for p in normalized[0].primitives] == [Line, Quadratic, Bezier]
        assert [len(p.points) for p in normalized[0].primitives] == [2, 3, 4]

    def test_precision_from_config(self) -> None:
        """Test the number of kept digits follows the configuration."""
        bbox = BoundingBox(Point(0, 0), Point(3, 3))
        normalizer = CoordinateNormalizer(bbox, NormalizationConfig(precision=2))

        assert normalizer.normalize_point(Point(1, 2)) == Point(0.33, 0.66)

    def test_flat_geometry_rejected(self) -> None:
        """Test a box without vertical extent cannot be normalized."""
        bbox = BoundingBox(Point(0, 5), Point(10, 5))
        with pytest.raises(NumericError, match="vertical extent"):
            CoordinateNormalizer(bbox)
