"""Positioned glyphs produced by text shaping.

This module defines the glyph-level data exchanged between the text shaper
and the outline source: which glyph to fetch, and where to place it.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GlyphKey:
    """Identifies one glyph outline at one size.

    Used as the outline cache key.

    Attributes:
        glyph_id: Glyph index in the font
        font_size: Font size in pixels
    """

    glyph_id: int
    font_size: float


@dataclass(frozen=True, slots=True)
class PlacedGlyph:
    """A glyph with its physical pixel position.

    Attributes:
        x: Horizontal pixel position
        y: Vertical pixel position (run line y plus glyph offset)
        key: Outline identifier
        cluster: Index of the source character cluster
    """

    x: int
    y: int
    key: GlyphKey
    cluster: int = 0


@dataclass
class LayoutRun:
    """One laid-out line of text.

    Attributes:
        line_index: Zero-based line number
        line_y: Baseline position of the line in pixels
        glyphs: Glyphs in visual order
    """

    line_index: int
    line_y: float
    glyphs: list[PlacedGlyph] = field(default_factory=list)
