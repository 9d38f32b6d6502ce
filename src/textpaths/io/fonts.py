"""Font location and loading.

This module resolves which font file to use (an explicit path or a
fontconfig match for a family name) and loads it with fontTools, keeping the
raw bytes around for HarfBuzz.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont

from textpaths.config import FontConfig
from textpaths.exceptions import FontNotFoundError

logger = logging.getLogger(__name__)

FC_MATCH_TIMEOUT_S = 5


@dataclass(frozen=True)
class FontFace:
    """A font file and the face index inside it.

    Attributes:
        path: Font file path
        index: Face index (non-zero only for collections)
    """

    path: Path
    index: int = 0


class FontLocator:
    """Resolves the font face to shape with.

    An explicit ``font_path`` in the configuration wins; otherwise fontconfig
    is asked for the best match for the configured family.

    Example:
        face = FontLocator(FontConfig(family="DejaVu Sans")).locate()
    """

    def __init__(self, config: FontConfig | None = None) -> None:
        self.config = config or FontConfig()

    def locate(self) -> FontFace:
        """Find the font face to use.

        Returns:
            Resolved font face

        Raises:
            FontNotFoundError: If no font file can be found
        """
        if self.config.font_path is not None:
            if not self.config.font_path.is_file():
                raise FontNotFoundError(
                    str(self.config.font_path), "font file does not exist"
                )
            return FontFace(self.config.font_path, self.config.font_index)

        face = self._match_with_fc(self.config.family)
        if face is None:
            raise FontNotFoundError(self.config.family, "fontconfig returned no match")
        return face

    def _match_with_fc(self, family: str) -> FontFace | None:
        """Use fontconfig to match a family name.

        Args:
            family: Font family name or generic family (e.g. "sans-serif")

        Returns:
            Matched font face, or None if fontconfig is unavailable or fails
        """
        try:
            result = subprocess.run(
                ["fc-match", "--format=%{file}\\n%{index}", family],
                capture_output=True,
                text=True,
                timeout=FC_MATCH_TIMEOUT_S,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("fc-match failed for %s: %s", family, e)
            return None

        if result.returncode != 0:
            return None

        lines = result.stdout.strip().split("\n")
        if not lines or not lines[0]:
            return None

        font_file = Path(lines[0])
        font_index = int(lines[1]) if len(lines) >= 2 and lines[1].isdigit() else 0
        if not font_file.exists():
            return None

        logger.debug("fc-match resolved %s to %s#%d", family, font_file, font_index)
        return FontFace(font_file, font_index)


class LoadedFont:
    """A font loaded both as fontTools TTFont and as raw bytes.

    Example:
        with load_font(face) as font:
            print(font.units_per_em)
    """

    def __init__(self, face: FontFace, ttfont: TTFont, data: bytes) -> None:
        self.face = face
        self.ttfont = ttfont
        self.data = data

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.ttfont["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def ascender(self) -> int:
        """Return the hhea ascender in font units."""
        if "hhea" in self.ttfont:
            return self.ttfont["hhea"].ascent  # type: ignore[attr-defined]
        return self.units_per_em

    def close(self) -> None:
        """Close the font file and free resources."""
        self.ttfont.close()

    def __enter__(self) -> "LoadedFont":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.close()


def load_font(face: FontFace) -> LoadedFont:
    """Load a font face.

    Args:
        face: Face to load

    Returns:
        Loaded font

    Raises:
        FontNotFoundError: If the file cannot be read or parsed
    """
    try:
        data = face.path.read_bytes()
        ttfont = TTFont(str(face.path), fontNumber=face.index, lazy=True)
    except Exception as e:
        raise FontNotFoundError(str(face.path), str(e)) from e

    return LoadedFont(face, ttfont, data)
