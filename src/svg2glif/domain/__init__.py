"""Domain models for svg2glif.

This module contains the domain models representing path commands, points,
contours, anchors and glyphs. All models are:

- Immutable (frozen dataclasses)
- Created fresh for each conversion
- Independent of fonttools and XML implementation details

Key classes:
- MoveTo, LineTo, CurveTo, ClosePath: Parsed path commands
- Point: A 2D point with its role on the contour
- Contour: An open or closed sequence of points
- Anchor: A named point
- Glyph: A converted glyph with contours, anchors and metadata
"""

from svg2glif.domain.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand
from svg2glif.domain.contour import Contour, Point, PointType
from svg2glif.domain.glyph import Anchor, Glyph, GlyphMetadata

__all__: list[str] = [
    # Enums
    "PointType",
    # Path commands
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    # Core types
    "Point",
    "Contour",
    "Anchor",
    "GlyphMetadata",
    "Glyph",
]
