"""Domain models for textpaths.

This module contains the core domain models representing points, path
primitives, glyph shapes, drawing commands and positioned glyphs. All value
models are immutable (frozen dataclasses) and independent of the fontTools and
HarfBuzz implementation details.

Key classes:
- Point: A 2D point
- BoundingBox: Axis-aligned box
- Line, Quadratic, Bezier: Path primitive variants
- Shape: The primitives of one glyph
- ShapeCollection: All shapes in layout order
- MoveTo, LineTo, QuadTo, CurveTo, Close: Drawing commands
- GlyphKey, PlacedGlyph, LayoutRun: Shaping output
"""

from textpaths.domain.command import Close, CurveTo, DrawCommand, LineTo, MoveTo, QuadTo
from textpaths.domain.glyph import GlyphKey, LayoutRun, PlacedGlyph
from textpaths.domain.point import BoundingBox, Point
from textpaths.domain.primitive import (
    Bezier,
    Line,
    Primitive,
    Quadratic,
    primitive_from_dict,
    primitive_to_dict,
)
from textpaths.domain.shape import Shape, ShapeCollection

__all__: list[str] = [
    # Geometry
    "Point",
    "BoundingBox",
    # Primitives
    "Line",
    "Quadratic",
    "Bezier",
    "Primitive",
    "primitive_from_dict",
    "primitive_to_dict",
    # Shapes
    "Shape",
    "ShapeCollection",
    # Commands
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CurveTo",
    "Close",
    "DrawCommand",
    # Glyphs
    "GlyphKey",
    "PlacedGlyph",
    "LayoutRun",
]
