"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Textpaths[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, units_per_em: int, font_size: float) -> None:
    """Print the font chosen for shaping."""
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(f"  {units_per_em:,} UPM {SYM_DOT} {font_size:g}px")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    glyphs: int,
    shapes: int,
    skipped: int,
    primitives: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        glyphs: Number of shaped glyphs
        shapes: Number of shapes written
        skipped: Number of glyphs without geometry
        primitives: Total number of primitives written
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {shapes} shapes {SYM_DOT} "
        f"{primitives} primitives {SYM_DOT} {skipped} blank"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
