"""Exception hierarchy for Textpaths."""


class TextPathsError(Exception):
    """Base exception for all Textpaths errors."""

    pass


class ShapingError(TextPathsError):
    """Errors raised by the text shaper or the glyph outline source."""

    pass


class FontNotFoundError(ShapingError):
    """No usable font could be located."""

    def __init__(self, family: str, reason: str) -> None:
        self.family = family
        self.reason = reason
        super().__init__(f"No font found for '{family}': {reason}")


class GlyphOutlineError(ShapingError):
    """The outline source could not produce commands for a glyph."""

    def __init__(self, glyph_id: int, reason: str) -> None:
        self.glyph_id = glyph_id
        self.reason = reason
        super().__init__(f"No outline for glyph {glyph_id}: {reason}")


class GeometryError(TextPathsError):
    """Malformed drawing command ordering."""

    pass


class MissingPointError(GeometryError):
    """A drawing command referenced an undefined previous or start point."""

    def __init__(self, command: str, point_name: str) -> None:
        self.command = command
        self.point_name = point_name
        super().__init__(f"Cannot {command} without a {point_name}")


class EmptyInputError(TextPathsError):
    """No geometry to aggregate."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NumericError(TextPathsError):
    """Non-finite or degenerate coordinate values."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class OutputWriteError(TextPathsError):
    """Error writing the output document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
