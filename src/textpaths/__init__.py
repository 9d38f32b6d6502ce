"""Textpaths - Convert shaped text into normalized vector path primitives.

Textpaths is a CLI tool that shapes a string with a system font, extracts each
glyph's outline as lines, quadratic and cubic Bezier segments, and rescales the
whole collection into a bounded, quantized coordinate space serialized as JSON.

Example:
    $ textpaths "Hello" hello.json

This will write hello.json containing one shape per visible glyph.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
