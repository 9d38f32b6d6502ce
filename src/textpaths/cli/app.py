"""CLI application entry point for textpaths.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from textpaths import __version__
from textpaths.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
)
from textpaths.config import TextPathsSettings, get_default_settings
from textpaths.core import ShapePipeline
from textpaths.exceptions import OutputWriteError, ShapingError, TextPathsError
from textpaths.io import FontLocator, FontOutlineSource, HarfBuzzShaper, ShapeWriter, load_font

# Create the Typer app
app = typer.Typer(
    name="textpaths",
    help="Convert text into normalized vector path primitives, one shape per glyph.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Textpaths[/bold blue] v{__version__}")
        raise typer.Exit()


@contextmanager
def open_pipeline(settings: TextPathsSettings) -> Iterator[ShapePipeline]:
    """Locate and load the font, then build a pipeline around it.

    Args:
        settings: Textpaths settings

    Yields:
        Pipeline backed by HarfBuzz shaping and fontTools outlines
    """
    face = FontLocator(settings.font).locate()
    with load_font(face) as font:
        print_font_info(str(face.path), font.units_per_em, settings.text.font_size)
        yield ShapePipeline(
            shaper=HarfBuzzShaper(font, settings.text),
            outlines=FontOutlineSource(font),
            config=settings,
        )


@app.command()
def convert(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to convert into shapes",
            show_default=False,
        ),
    ],
    output_file: Annotated[
        Path,
        typer.Argument(
            help="Path of the JSON document to write",
            show_default=False,
        ),
    ],
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert TEXT into normalized glyph shapes and write them to OUTPUT_FILE.

    Each visible glyph becomes one shape made of Line, Quadratic and Bezier
    primitives. Coordinates are rescaled by the height of the whole text and
    truncated to three decimals.

    Example:
        textpaths "Hello" hello.json
    """
    print_header(__version__)

    settings = get_default_settings()

    try:
        print_step("Shaping text")
        with open_pipeline(settings) as pipeline:
            shapes = pipeline.run(text)
            stats = pipeline.stats

        print_step("Writing shapes")
        ShapeWriter(output_file).write(shapes)

        print_success(
            output_path=str(output_file),
            file_size=_format_file_size(output_file),
            total_time_s=stats.duration_seconds,
            glyphs=stats.glyph_count,
            shapes=stats.shape_count,
            skipped=stats.skipped_count,
            primitives=stats.primitive_count,
        )

    except ShapingError as e:
        print_error(f"Could not shape text: {e}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except TextPathsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
