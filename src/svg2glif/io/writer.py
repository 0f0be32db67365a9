"""GLIF writer for saving converted glyphs.

This module provides the GlifWriter class for serializing glyphs to GLIF
files.
"""

from pathlib import Path

from svg2glif.domain.glyph import Glyph
from svg2glif.io.converter import glyph_to_glif


class GlifWriter:
    """Writes converted glyphs as GLIF files.

    Example:
        writer = GlifWriter(Path("A.glif"))
        writer.write(glyph)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the GLIF writer.

        Args:
            output_path: Path where the GLIF file will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Path the GLIF file is written to."""
        return self._output_path

    def write(self, glyph: Glyph) -> int:
        """Serialize a glyph and save it to the output path.

        The document is fully serialized before the file is opened, so a
        failing serialization never leaves a partial file behind.

        Args:
            glyph: Glyph in design space

        Returns:
            Number of bytes written

        Raises:
            OSError: If file cannot be written
        """
        data = glyph_to_glif(glyph)
        self._output_path.write_bytes(data)
        return len(data)

    @staticmethod
    def get_glif_path(input_path: Path) -> Path:
        """Generate the default output path for an SVG input.

        Converts: A.svg -> A.glif
                  /path/to/uni0041.svg -> /path/to/uni0041.glif

        Args:
            input_path: SVG file path

        Returns:
            Path with a .glif extension next to the input
        """
        return input_path.with_suffix(".glif")
