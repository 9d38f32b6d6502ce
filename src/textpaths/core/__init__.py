"""Core processing algorithms for textpaths.

This module contains the core algorithms for:

- Command conversion (pen commands into path primitives)
- Bounding box aggregation (per shape and global)
- Coordinate normalization (rescaling and quantization)
- Pipeline orchestration

All functions are stateless apart from the accumulators of a single pass.

Key functions:
- commands_to_shape: Convert one glyph's commands into a Shape
- translate_commands: Move commands to a glyph's position
- shape_bounding_box: Bounding box of one shape
- global_bounding_box: Bounding box of a whole collection
- normalize_shapes: Rescale a collection against a bounding box
- quantize: Truncate a value to fixed decimal steps

Key classes:
- ShapeBuilder: Stateful command replay for one glyph
- CoordinateNormalizer: Point rescaling against a bounding box
- ShapePipeline: End-to-end orchestrator
"""

from textpaths.core.bounds import (
    global_bounding_box,
    points_bounding_box,
    shape_bounding_box,
)
from textpaths.core.converter import ShapeBuilder, commands_to_shape, translate_commands
from textpaths.core.normalizer import CoordinateNormalizer, normalize_shapes, quantize
from textpaths.core.pipeline import OutlineSource, ShapePipeline, TextShaper

__all__ = [
    # Normalizer
    "CoordinateNormalizer",
    # Pipeline
    "OutlineSource",
    # Converter
    "ShapeBuilder",
    "ShapePipeline",
    "TextShaper",
    "commands_to_shape",
    # Bounds
    "global_bounding_box",
    "normalize_shapes",
    "points_bounding_box",
    "quantize",
    "shape_bounding_box",
    "translate_commands",
]
