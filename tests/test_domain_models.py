"""Tests for domain models to verify they work correctly."""

import pytest

from textpaths.domain import (
    Bezier,
    BoundingBox,
    Close,
    CurveTo,
    GlyphKey,
    LayoutRun,
    Line,
    LineTo,
    MoveTo,
    PlacedGlyph,
    Point,
    QuadTo,
    Quadratic,
    Shape,
    ShapeCollection,
    primitive_from_dict,
    primitive_to_dict,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, 2.5).to_tuple() == (1.5, 2.5)

    def test_point_from_list(self) -> None:
        """Test point deserialization from a pair."""
        assert Point.from_list([3, 4]) == Point(3.0, 4.0)

    def test_point_from_list_wrong_length(self) -> None:
        """Test that a non-pair is rejected."""
        with pytest.raises(ValueError):
            Point.from_list([1.0, 2.0, 3.0])

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_translate(self) -> None:
        """Test translation returns a new point."""
        p = Point(1.0, 2.0)
        assert p.translate(10.0, -2.0) == Point(11.0, 0.0)
        assert p == Point(1.0, 2.0)

    def test_component_wise_min_max(self) -> None:
        """Test min and max combine each axis independently."""
        a = Point(0.0, 10.0)
        b = Point(5.0, -3.0)
        assert a.min(b) == Point(0.0, -3.0)
        assert a.max(b) == Point(5.0, 10.0)


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_height(self) -> None:
        """Test height is the vertical extent."""
        bbox = BoundingBox(Point(1.0, 2.0), Point(11.0, 7.0))
        assert bbox.height == 5.0

    def test_union(self) -> None:
        """Test union covers both boxes."""
        a = BoundingBox(Point(0.0, 0.0), Point(10.0, 10.0))
        b = BoundingBox(Point(-5.0, 2.0), Point(8.0, 20.0))
        assert a.union(b).to_tuple() == (-5.0, 0.0, 10.0, 20.0)


class TestPrimitives:
    """Tests for primitive variants."""

    def test_line_points(self) -> None:
        """Test Line exposes its two points."""
        line = Line(Point(0, 0), Point(1, 1))
        assert line.points == (Point(0, 0), Point(1, 1))
        assert line.start == Point(0, 0)
        assert line.end == Point(1, 1)
        assert line.kind == "Line"

    def test_quadratic_points(self) -> None:
        """Test Quadratic exposes control point between endpoints."""
        quad = Quadratic(Point(0, 0), Point(1, 2), Point(2, 0))
        assert quad.points == (Point(0, 0), Point(1, 2), Point(2, 0))
        assert quad.end == Point(2, 0)

    def test_bezier_points(self) -> None:
        """Test Bezier exposes both control points in order."""
        cubic = Bezier(Point(0, 0), Point(1, 2), Point(3, 2), Point(4, 0))
        assert len(cubic.points) == 4
        assert cubic.control1 == Point(3, 2)
        assert cubic.kind == "Bezier"

    def test_map_points_keeps_variant(self) -> None:
        """Test mapping points preserves variant and order."""
        quad = Quadratic(Point(0, 0), Point(1, 2), Point(2, 0))
        doubled = quad.map_points(lambda p: Point(p.x * 2, p.y * 2))
        assert isinstance(doubled, Quadratic)
        assert doubled.points == (Point(0, 0), Point(2, 4), Point(4, 0))

    def test_primitive_to_dict(self) -> None:
        """Test primitives serialize as single-key tagged objects."""
        line = Line(Point(0.5, 0.0), Point(1.0, 0.25))
        assert primitive_to_dict(line) == {"Line": [[0.5, 0.0], [1.0, 0.25]]}

    def test_primitive_from_dict(self) -> None:
        """Test tagged objects deserialize to the right variant."""
        data = {"Bezier": [[0, 0], [1, 1], [2, 1], [3, 0]]}
        cubic = primitive_from_dict(data)
        assert isinstance(cubic, Bezier)
        assert cubic.p1 == Point(3.0, 0.0)

    def test_primitive_from_dict_unknown_kind(self) -> None:
        """Test unknown tags are rejected."""
        with pytest.raises(ValueError, match="Unknown primitive kind"):
            primitive_from_dict({"Arc": [[0, 0], [1, 1]]})

    def test_primitive_from_dict_wrong_point_count(self) -> None:
        """Test point counts are checked per variant."""
        with pytest.raises(ValueError, match="expects 3 points"):
            primitive_from_dict({"Quadratic": [[0, 0], [1, 1]]})


class TestShape:
    """Tests for Shape and ShapeCollection."""

    @pytest.fixture
    def triangle(self) -> Shape:
        """Create a closed triangle shape."""
        return Shape(
            [
                Line(Point(0, 0), Point(10, 0)),
                Line(Point(10, 0), Point(5, 10)),
                Line(Point(5, 10), Point(0, 0)),
            ]
        )

    def test_shape_is_immutable_sequence(self, triangle: Shape) -> None:
        """Test primitives are stored as a tuple."""
        assert isinstance(triangle.primitives, tuple)
        assert len(triangle.primitives) == 3

    def test_shape_points_include_duplicates(self, triangle: Shape) -> None:
        """Test points() lists every point of every primitive."""
        assert len(triangle.points()) == 6

    def test_empty_shape(self) -> None:
        """Test empty shape detection."""
        assert Shape().is_empty()

    def test_shape_serialization(self, triangle: Shape) -> None:
        """Test shape serialization and deserialization."""
        data = triangle.to_dict()
        assert list(data) == ["primitives"]
        assert Shape.from_dict(data) == triangle

    def test_collection_counts(self, triangle: Shape) -> None:
        """Test collection size and primitive count."""
        shapes = ShapeCollection([triangle, triangle])
        assert len(shapes) == 2
        assert shapes.primitive_count == 6

    def test_collection_map_points_returns_new_collection(self, triangle: Shape) -> None:
        """Test mapping produces a new collection and leaves the source alone."""
        shapes = ShapeCollection([triangle])
        moved = shapes.map_points(lambda p: p.translate(1, 1))
        assert moved[0].primitives[0].start == Point(1, 1)
        assert shapes[0].primitives[0].start == Point(0, 0)

    def test_collection_document_layout(self, triangle: Shape) -> None:
        """Test the serialized layout is an array of shape objects."""
        document = ShapeCollection([triangle]).to_list()
        assert document[0]["primitives"][0] == {"Line": [[0, 0], [10, 0]]}
        assert ShapeCollection.from_list(document).shapes == [triangle]


class TestCommands:
    """Tests for drawing commands."""

    def test_translate_moves_every_point(self) -> None:
        """Test every command variant translates all of its points."""
        assert MoveTo(Point(0, 0)).translate(2, 3) == MoveTo(Point(2, 3))
        assert LineTo(Point(1, 1)).translate(2, 3) == LineTo(Point(3, 4))
        assert QuadTo(Point(0, 1), Point(1, 0)).translate(1, 1) == QuadTo(
            Point(1, 2), Point(2, 1)
        )
        assert CurveTo(Point(0, 0), Point(1, 1), Point(2, 2)).translate(1, 0) == CurveTo(
            Point(1, 0), Point(2, 1), Point(3, 2)
        )
        assert Close().translate(5, 5) == Close()


class TestGlyphs:
    """Tests for shaping output types."""

    def test_glyph_key_hashable(self) -> None:
        """Test glyph keys work as cache keys."""
        cache = {GlyphKey(36, 14.0): "A"}
        assert cache[GlyphKey(36, 14.0)] == "A"

    def test_layout_run_glyphs_not_shared(self) -> None:
        """Test each run starts with its own glyph list."""
        first = LayoutRun(line_index=0, line_y=13.0)
        second = LayoutRun(line_index=1, line_y=33.0)
        first.glyphs.append(PlacedGlyph(0, 13, GlyphKey(1, 14.0)))
        assert second.glyphs == []
        assert first.glyphs[0].cluster == 0
