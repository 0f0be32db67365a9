"""File I/O layer for svg2glif.

This module handles reading SVG files and writing GLIF files. It provides
a clean abstraction layer between the file system, fontTools' glifLib and
the domain models.

Key responsibilities:
- Load SVG drawings from disk
- Serialize domain glyphs into GLIF documents
- Write GLIF files with the default naming convention

Key classes:
- SvgReader: Load SVG files
- GlifWriter: Save GLIF files
"""

from svg2glif.io.converter import glyph_to_glif
from svg2glif.io.reader import SvgReader
from svg2glif.io.writer import GlifWriter

__all__ = [
    "GlifWriter",
    "SvgReader",
    "glyph_to_glif",
]
