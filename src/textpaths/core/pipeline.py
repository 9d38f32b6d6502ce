"""Text-to-shapes pipeline orchestration.

This module coordinates the full workflow for one piece of text:

1. Shape the text into positioned glyphs
2. Fetch each glyph's outline commands and move them into place
3. Convert commands into one Shape per glyph with geometry
4. Compute the global bounding box
5. Normalize every coordinate against that box

Key components:
- TextShaper, OutlineSource: Protocols for the shaping and outline collaborators
- ShapePipeline: Main orchestrator class
"""

import time
from collections.abc import Sequence
from typing import Protocol

import structlog

from textpaths.config import TextPathsSettings
from textpaths.core.bounds import global_bounding_box
from textpaths.core.converter import commands_to_shape, translate_commands
from textpaths.core.normalizer import normalize_shapes
from textpaths.domain import DrawCommand, GlyphKey, LayoutRun, PlacedGlyph, ShapeCollection
from textpaths.exceptions import GlyphOutlineError, TextPathsError
from textpaths.utils import PipelineLogger, PipelineStats, configure_logging


class TextShaper(Protocol):
    """Turns text into laid-out runs of positioned glyphs."""

    def layout_runs(self, text: str) -> Sequence[LayoutRun]: ...


class OutlineSource(Protocol):
    """Returns glyph-local drawing commands for a glyph."""

    def get_outline_commands(self, key: GlyphKey) -> Sequence[DrawCommand] | None: ...


class ShapePipeline:
    """Orchestrates conversion of text into normalized shapes.

    The shaper and outline source are passed in explicitly so that callers
    control their lifetime and tests can substitute fakes.

    Example:
        pipeline = ShapePipeline(shaper, outlines, settings)
        shapes = pipeline.run("Hello")
    """

    def __init__(
        self,
        shaper: TextShaper,
        outlines: OutlineSource,
        config: TextPathsSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            shaper: Text shaping collaborator
            outlines: Glyph outline collaborator
            config: Textpaths settings (defaults used if None)
            logger: Structured logger (configured from settings if None)
        """
        self.shaper = shaper
        self.outlines = outlines
        self.config = config or TextPathsSettings()
        if logger is None:
            logger = configure_logging(
                log_file=self.config.logging.log_file,
                console_level=self.config.logging.log_level,
                file_level=self.config.logging.file_log_level,
            )
        self.logger = logger
        self.pipeline_logger = PipelineLogger(logger)

    @property
    def stats(self) -> PipelineStats:
        """Statistics of the latest run."""
        return self.pipeline_logger.stats

    def collect_glyphs(self, text: str) -> list[PlacedGlyph]:
        """Shape text and flatten every run into one glyph list.

        Args:
            text: Input text

        Returns:
            Positioned glyphs in layout order

        Raises:
            ShapingError: If shaping fails
        """
        runs = self.shaper.layout_runs(text)
        glyphs = [glyph for run in runs for glyph in run.glyphs]
        self.pipeline_logger.log_layout(len(text), len(runs), len(glyphs))
        return glyphs

    def build_shapes(self, glyphs: Sequence[PlacedGlyph]) -> ShapeCollection:
        """Convert each glyph's outline into a shape.

        Glyphs whose outline has no commands (spaces and other blank glyphs)
        contribute nothing.

        Args:
            glyphs: Positioned glyphs in layout order

        Returns:
            Collection with one shape per glyph with geometry

        Raises:
            ShapingError: If the outline source fails for a glyph
            GeometryError: If a glyph's commands are malformed
        """
        shapes = ShapeCollection()

        for glyph in glyphs:
            commands = self.outlines.get_outline_commands(glyph.key)
            if commands is None:
                raise GlyphOutlineError(
                    glyph.key.glyph_id, "Expected a list of commands for character"
                )

            translated = translate_commands(commands, glyph.x, glyph.y)
            shape = commands_to_shape(translated)
            if shape is None:
                self.pipeline_logger.log_glyph_skipped(glyph.key.glyph_id, "no outline commands")
                continue

            shapes.append(shape)
            self.pipeline_logger.log_glyph_converted(
                glyph.key.glyph_id,
                glyph.x,
                glyph.y,
                len(shape.primitives),
                cluster=glyph.cluster,
            )

        return shapes

    def run(self, text: str) -> ShapeCollection:
        """Run the full pipeline on text.

        Args:
            text: Input text

        Returns:
            Normalized shape collection

        Raises:
            TextPathsError: Any fatal pipeline error; no partial result exists
        """
        self.pipeline_logger.reset()
        stats = self.pipeline_logger.stats
        stats.start_time = time.time()

        try:
            glyphs = self.collect_glyphs(text)
            shapes = self.build_shapes(glyphs)

            bbox = global_bounding_box(shapes)
            self.pipeline_logger.log_bounds(*bbox.to_tuple())

            normalized = normalize_shapes(shapes, bbox, self.config.normalization)
        except TextPathsError as e:
            self.pipeline_logger.log_error(e)
            raise
        finally:
            stats.end_time = time.time()

        return normalized
