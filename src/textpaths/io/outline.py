"""Glyph outline extraction with fontTools pens.

This module draws glyphs through a fontTools pen and records the outline as
drawing commands in glyph-local pixel coordinates.

The pen derives from BasePen, which decomposes multi-point TrueType
``qCurveTo`` segments and cubic polybeziers into single segments and resolves
composite glyph components through the glyph set. Open contours
(``endPath``) produce no Close command.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from textpaths.domain import Close, CurveTo, DrawCommand, GlyphKey, LineTo, MoveTo, Point, QuadTo
from textpaths.exceptions import GlyphOutlineError
from textpaths.io.fonts import LoadedFont


class CommandPen(BasePen):
    """Pen recording scaled drawing commands.

    Example:
        pen = CommandPen(glyph_set, scale=14 / 2048)
        glyph_set["A"].draw(pen)
        pen.commands
    """

    def __init__(self, glyph_set: Any, scale: float = 1.0) -> None:
        super().__init__(glyph_set)
        self.scale = scale
        self.commands: list[DrawCommand] = []

    def _point(self, pt: tuple[float, float]) -> Point:
        return Point(pt[0] * self.scale, pt[1] * self.scale)

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(MoveTo(self._point(pt)))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.commands.append(LineTo(self._point(pt)))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.commands.append(QuadTo(self._point(pt1), self._point(pt2)))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.commands.append(CurveTo(self._point(pt1), self._point(pt2), self._point(pt3)))

    def _closePath(self) -> None:
        self.commands.append(Close())

    def _endPath(self) -> None:
        pass


class FontOutlineSource:
    """Returns glyph-local outline commands for glyphs of one font.

    Commands are cached per GlyphKey for the lifetime of the source.

    Example:
        outlines = FontOutlineSource(font)
        commands = outlines.get_outline_commands(GlyphKey(36, 14.0))
    """

    def __init__(self, font: LoadedFont) -> None:
        self._font = font
        self._glyph_set = font.ttfont.getGlyphSet()
        self._glyph_order = font.ttfont.getGlyphOrder()
        self._cache: dict[GlyphKey, list[DrawCommand]] = {}

    def get_outline_commands(self, key: GlyphKey) -> list[DrawCommand]:
        """Get the drawing commands of a glyph.

        Args:
            key: Glyph id and font size

        Returns:
            Commands in glyph-local pixel coordinates; empty for blank glyphs

        Raises:
            GlyphOutlineError: If the glyph does not exist or cannot be drawn
        """
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if not 0 <= key.glyph_id < len(self._glyph_order):
            raise GlyphOutlineError(key.glyph_id, "glyph id out of range")

        name = self._glyph_order[key.glyph_id]
        pen = CommandPen(self._glyph_set, scale=key.font_size / self._font.units_per_em)

        try:
            self._glyph_set[name].draw(pen)
        except Exception as e:
            raise GlyphOutlineError(key.glyph_id, str(e)) from e

        self._cache[key] = pen.commands
        return pen.commands

    @property
    def cache_size(self) -> int:
        """Number of cached outlines."""
        return len(self._cache)
