"""I/O layer for textpaths.

This module handles everything that touches fonts, the shaping engine and the
output file, and provides a clean abstraction layer between fontTools,
HarfBuzz and the domain models.

Key responsibilities:
- Locate a font through fontconfig or an explicit path
- Shape text into positioned glyphs (HarfBuzz)
- Extract glyph outlines as drawing commands (fontTools pens)
- Write and read shape documents (JSON)

Key classes:
- FontLocator: Resolve the font face
- HarfBuzzShaper: Shape text into layout runs
- FontOutlineSource: Cached glyph outline commands
- ShapeWriter: Save shape documents
"""

from textpaths.io.fonts import FontFace, FontLocator, LoadedFont, load_font
from textpaths.io.outline import CommandPen, FontOutlineSource
from textpaths.io.shaper import HarfBuzzShaper
from textpaths.io.writer import ShapeWriter, dumps_shapes, read_shapes

__all__ = [
    "CommandPen",
    "FontFace",
    "FontLocator",
    "FontOutlineSource",
    "HarfBuzzShaper",
    "LoadedFont",
    "ShapeWriter",
    "dumps_shapes",
    "load_font",
    "read_shapes",
]
