"""Shape document writer and reader.

The document is a JSON array of shapes. Each shape is an object with a single
``primitives`` field; each primitive is a single-key object whose key is the
variant name and whose value is its list of ``[x, y]`` points.

Example document:
    [{"primitives": [{"Line": [[0.0, 0.0], [1.0, 0.0]]}]}]
"""

import json
from pathlib import Path

from textpaths.domain import ShapeCollection
from textpaths.exceptions import NumericError, OutputWriteError


def dumps_shapes(shapes: ShapeCollection) -> str:
    """Serialize a collection to a JSON string.

    Raises:
        NumericError: If a coordinate is NaN or infinite
    """
    try:
        return json.dumps(shapes.to_list(), allow_nan=False, separators=(",", ":"))
    except ValueError as e:
        raise NumericError(f"Cannot serialize non-finite coordinate: {e}") from e


class ShapeWriter:
    """Writes shape collections as JSON documents.

    The whole document is serialized in memory before the file is opened,
    so a serialization failure never leaves a file behind.

    Example:
        writer = ShapeWriter(Path("shapes.json"))
        writer.write(shapes)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the shape writer.

        Args:
            output_path: Path where the document will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, shapes: ShapeCollection) -> int:
        """Save the collection to the output path.

        Args:
            shapes: Normalized shape collection

        Returns:
            Number of bytes written

        Raises:
            NumericError: If a coordinate cannot be serialized
            OutputWriteError: If the file cannot be created or written
        """
        data = dumps_shapes(shapes).encode("utf-8")

        try:
            with open(self._output_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise OutputWriteError(str(self._output_path), e.strerror or str(e)) from e

        return len(data)


def read_shapes(path: Path) -> ShapeCollection:
    """Load a shape document.

    Args:
        path: Document path

    Returns:
        Parsed shape collection

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is not valid JSON or not a shape document
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Shape document must be a JSON array")
    return ShapeCollection.from_list(data)
