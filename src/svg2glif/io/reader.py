"""SVG reader for loading glyph drawings.

This module provides the SvgReader class for loading SVG files and
deriving the default glyph name from the file name.
"""

from pathlib import Path


class SvgReader:
    """Loads SVG glyph drawings from disk.

    The SVG is read as bytes so the XML parser can honour the document's
    own encoding declaration.

    Example:
        with SvgReader(Path("A.svg")) as reader:
            glyph = convert(reader.data, config, glyph_name=reader.glyph_name)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._data: bytes | None = None

    def load(self) -> bytes:
        """Load the SVG file.

        Returns:
            Raw SVG bytes

        Raises:
            FileNotFoundError: If the SVG file does not exist
            OSError: If the file cannot be read
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        self._data = self._svg_path.read_bytes()
        return self._data

    @property
    def data(self) -> bytes:
        """Return the loaded SVG bytes.

        Raises:
            RuntimeError: If the SVG has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._data

    @property
    def glyph_name(self) -> str:
        """Default glyph name: the file name without extension."""
        return self._svg_path.stem

    def close(self) -> None:
        """Drop the loaded data."""
        self._data = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
