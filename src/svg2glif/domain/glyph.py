"""Glyph representation and metadata.

This module defines the glyph domain model, which represents the result of
one conversion: outline contours, named anchors and metadata.
"""

from dataclasses import dataclass

from svg2glif.domain.contour import Contour


@dataclass(frozen=True, slots=True)
class Anchor:
    """A named point in design space.

    Attributes:
        name: Anchor name (e.g. "top", "bottom")
        x: X coordinate
        y: Y coordinate
    """

    name: str
    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Return the anchor position as an (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
    """

    name: str
    unicode: int | None = None
    advance_width: float = 0


@dataclass(frozen=True)
class Glyph:
    """A converted glyph.

    Contours keep the document order of their source paths and anchors the
    document order of their source text elements.

    Attributes:
        metadata: Glyph metadata (name, unicode, advance)
        contours: Contours forming the glyph outline
        anchors: Named anchors
    """

    metadata: GlyphMetadata
    contours: tuple[Contour, ...] = ()
    anchors: tuple[Anchor, ...] = ()

    @property
    def name(self) -> str:
        """Get glyph name from metadata.

        Returns:
            Glyph name
        """
        return self.metadata.name

    def is_empty(self) -> bool:
        """Check if glyph has no outlines.

        Returns:
            True if glyph has no contours, False otherwise
        """
        return len(self.contours) == 0

    @property
    def point_count(self) -> int:
        """Total number of points over all contours."""
        return sum(len(contour) for contour in self.contours)

    def get_anchor_names(self) -> list[str]:
        """Return anchor names in output order, duplicates included."""
        return [anchor.name for anchor in self.anchors]
