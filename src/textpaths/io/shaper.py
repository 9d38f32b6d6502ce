"""Text shaping with HarfBuzz.

This module turns a string into laid-out runs of positioned glyphs. Each
line of the input (split on newlines) becomes one run; glyph positions are
rounded to whole pixels.
"""

import uharfbuzz as hb

from textpaths.config import TextConfig
from textpaths.domain import GlyphKey, LayoutRun, PlacedGlyph
from textpaths.exceptions import ShapingError
from textpaths.io.fonts import LoadedFont


class HarfBuzzShaper:
    """Shapes text with a single font face.

    Example:
        shaper = HarfBuzzShaper(font, TextConfig(font_size=14.0))
        for run in shaper.layout_runs("Hello"):
            print(run.glyphs)
    """

    def __init__(self, font: LoadedFont, config: TextConfig | None = None) -> None:
        """Initialize the shaper.

        Args:
            font: Loaded font (bytes are handed to HarfBuzz)
            config: Font size and line height

        Raises:
            ShapingError: If HarfBuzz cannot open the font
        """
        self.config = config or TextConfig()
        self._units_per_em = font.units_per_em
        self._ascender = font.ascender

        try:
            face = hb.Face(hb.Blob(font.data), font.face.index)
            self._hb_font = hb.Font(face)
            self._hb_font.scale = (self._units_per_em, self._units_per_em)
        except Exception as e:
            raise ShapingError(f"Failed to create HarfBuzz font: {e}") from e

    @property
    def scale(self) -> float:
        """Font units to pixels."""
        return self.config.font_size / self._units_per_em

    def layout_runs(self, text: str) -> list[LayoutRun]:
        """Shape text into one run per line.

        Args:
            text: Input text

        Returns:
            Runs in line order, glyphs in visual order

        Raises:
            ShapingError: If HarfBuzz fails to shape a line
        """
        ascent_px = self._ascender * self.scale
        runs = []

        for line_index, line in enumerate(text.split("\n")):
            line_y = line_index * self.config.line_height + ascent_px
            runs.append(
                LayoutRun(
                    line_index=line_index,
                    line_y=line_y,
                    glyphs=self._shape_line(line, int(line_y)),
                )
            )

        return runs

    def _shape_line(self, line: str, line_y: int) -> list[PlacedGlyph]:
        if not line:
            return []

        try:
            buf = hb.Buffer()
            buf.add_str(line)
            buf.guess_segment_properties()
            hb.shape(self._hb_font, buf, {})
        except Exception as e:
            raise ShapingError(f"Failed to shape {line!r}: {e}") from e

        scale = self.scale
        pen_x = 0.0
        glyphs = []

        for info, pos in zip(buf.glyph_infos, buf.glyph_positions):
            x = round((pen_x + pos.x_offset) * scale)
            y = line_y + round(-pos.y_offset * scale)
            glyphs.append(
                PlacedGlyph(
                    x=x,
                    y=y,
                    key=GlyphKey(info.codepoint, self.config.font_size),
                    cluster=info.cluster,
                )
            )
            pen_x += pos.x_advance

        return glyphs
