"""Conversion of drawing commands into path primitives.

A glyph outline arrives as a sequence of pen commands (move, line, quadratic,
cubic, close). This module replays those commands and records one primitive
per drawn segment, producing the glyph's Shape.
"""

import logging
from collections.abc import Iterable, Sequence

from textpaths.domain import (
    Bezier,
    Close,
    CurveTo,
    DrawCommand,
    Line,
    LineTo,
    MoveTo,
    Point,
    Primitive,
    QuadTo,
    Quadratic,
    Shape,
)
from textpaths.exceptions import GeometryError, MissingPointError

logger = logging.getLogger(__name__)


class ShapeBuilder:
    """Replays drawing commands for one glyph and collects primitives.

    Tracks the last point reached and the anchor used to close a subpath.
    Only a MoveTo seen while no anchor is set establishes the anchor; Close
    consumes it. A glyph with several subpaths therefore closes every subpath
    opened before the first Close against the first subpath's start.

    Example:
        builder = ShapeBuilder()
        for command in commands:
            builder.feed(command)
        shape = builder.build()
    """

    def __init__(self) -> None:
        self.current_point: Point | None = None
        self.start_point: Point | None = None
        self._primitives: list[Primitive] = []

    def feed(self, command: DrawCommand) -> None:
        """Apply one drawing command.

        Args:
            command: Command to replay

        Raises:
            MissingPointError: If the command needs a point that is not set
            GeometryError: If the command type is not recognized
        """
        if isinstance(command, MoveTo):
            if self.start_point is None:
                self.start_point = command.point
            self.current_point = command.point

        elif isinstance(command, LineTo):
            from_point = self._require_current("LineTo")
            self._primitives.append(Line(from_point, command.point))
            self.current_point = command.point

        elif isinstance(command, QuadTo):
            from_point = self._require_current("QuadTo")
            self._primitives.append(Quadratic(from_point, command.control, command.point))
            self.current_point = command.point

        elif isinstance(command, CurveTo):
            from_point = self._require_current("CurveTo")
            self._primitives.append(
                Bezier(from_point, command.control0, command.control1, command.point)
            )
            self.current_point = command.point

        elif isinstance(command, Close):
            from_point = self._require_current("Close")
            if self.start_point is None:
                raise MissingPointError("Close", "starting point")
            end_point = self.start_point
            self.start_point = None
            self._primitives.append(Line(from_point, end_point))
            self.current_point = end_point

        else:
            raise GeometryError(f"Unsupported drawing command: {command!r}")

    def _require_current(self, command: str) -> Point:
        if self.current_point is None:
            raise MissingPointError(command, "previous point")
        return self.current_point

    @property
    def primitive_count(self) -> int:
        """Number of primitives recorded so far."""
        return len(self._primitives)

    def build(self) -> Shape:
        """Return the shape made of all primitives recorded so far."""
        return Shape(tuple(self._primitives))


def commands_to_shape(commands: Sequence[DrawCommand]) -> Shape | None:
    """Convert one glyph's drawing commands into a Shape.

    Args:
        commands: Commands already translated into the shared coordinate space

    Returns:
        Shape holding one primitive per drawn segment, or None if there are
        no commands (the glyph has no geometry)

    Raises:
        GeometryError: If a command references an undefined point

    Examples:
        >>> shape = commands_to_shape([
        ...     MoveTo(Point(0, 0)), LineTo(Point(10, 0)), Close(),
        ... ])
        >>> [p.kind for p in shape.primitives]
        ['Line', 'Line']
    """
    if len(commands) == 0:
        return None

    builder = ShapeBuilder()
    for command in commands:
        builder.feed(command)

    shape = builder.build()
    logger.debug("Converted %d commands into %d primitives", len(commands), len(shape.primitives))
    return shape


def translate_commands(
    commands: Iterable[DrawCommand], dx: float, dy: float
) -> list[DrawCommand]:
    """Move every command by (dx, dy).

    Used to place glyph-local outline commands at the glyph's pixel position.

    Args:
        commands: Glyph-local commands
        dx: Horizontal offset
        dy: Vertical offset

    Returns:
        Translated commands in the same order
    """
    return [command.translate(dx, dy) for command in commands]
