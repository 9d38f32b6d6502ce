"""Logging utilities for Textpaths."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

CONSOLE_HANDLER_NAME = "textpaths.console"
FILE_HANDLER_NAME = "textpaths.file"


@dataclass
class PipelineStats:
    """Statistics from a pipeline run."""

    glyph_count: int = 0
    shape_count: int = 0
    skipped_count: int = 0
    primitive_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Handlers from an earlier call are replaced, never stacked
    for handler in list(root_logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("textpaths")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        console_level=console_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking per-glyph progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def log_layout(self, text_length: int, run_count: int, glyph_count: int) -> None:
        """Log shaping results."""
        self._logger.info(
            "Text shaped",
            characters=text_length,
            runs=run_count,
            glyphs=glyph_count,
        )
        self._stats.glyph_count = glyph_count

    def log_glyph_converted(
        self,
        glyph_id: int,
        x: int,
        y: int,
        primitives: int,
        cluster: int = 0,
    ) -> None:
        """Log a glyph converted into a shape."""
        self._logger.debug(
            "Glyph converted",
            glyph_id=glyph_id,
            cluster=cluster,
            x=x,
            y=y,
            primitives=primitives,
        )
        self._stats.shape_count += 1
        self._stats.primitive_count += primitives

    def log_glyph_skipped(self, glyph_id: int, reason: str) -> None:
        """Log a glyph that contributed no shape."""
        self._logger.debug("Glyph skipped", glyph_id=glyph_id, reason=reason)
        self._stats.skipped_count += 1

    def log_bounds(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        """Log the global bounding box."""
        self._logger.info(
            "Global bounding box",
            min_x=round(min_x, 3),
            min_y=round(min_y, 3),
            max_x=round(max_x, 3),
            max_y=round(max_y, 3),
        )

    def log_error(self, error: Exception) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Pipeline failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    def reset(self) -> None:
        """Start a fresh set of statistics."""
        self._stats = PipelineStats()

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
