"""Command-line interface for textpaths.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Two positional arguments: text and output file
- Step and summary output
- Non-zero exit code with a diagnostic on any failure
"""

from textpaths.cli.app import cli, main

__all__ = ["cli", "main"]
