"""Converters between domain models and GLIF.

This module handles the conversion of our domain models (Glyph, Contour,
Point) into GLIF documents using fontTools' glifLib.

GLIF stores contours slightly differently from SVG subpaths:
- An open contour starts with a point of type "move"
- A closed contour has no move point; its first point carries the type of
  the segment that closes the contour
- Off-curve points carry no type attribute
"""

from typing import Any

from fontTools.ufoLib.glifLib import writeGlyphToString

from svg2glif.domain.contour import Contour, Point, PointType
from svg2glif.domain.glyph import Glyph


class _GlifGlyphObject:
    """Attribute holder in the shape glifLib expects for glyph objects."""

    def __init__(self, glyph: Glyph) -> None:
        self.width = format_number(glyph.metadata.advance_width)
        self.unicodes = [] if glyph.metadata.unicode is None else [glyph.metadata.unicode]
        self.anchors = [
            {
                "x": format_number(anchor.x),
                "y": format_number(anchor.y),
                "name": anchor.name,
            }
            for anchor in glyph.anchors
        ]


def format_number(value: float) -> int | float:
    """Normalize a coordinate for output.

    Integral values become ints so they are written without a trailing
    ".0"; other values keep their shortest float representation.

    Args:
        value: Coordinate or metric value

    Returns:
        int for integral values (with -0 mapped to 0), float otherwise
    """
    value = float(value)
    if value.is_integer():
        return int(value)
    return value


def contour_to_glif_points(contour: Contour) -> list[Point]:
    """Arrange a contour's points in GLIF order.

    Open contours keep their order with the first point typed "move".
    For closed contours, a final on-curve point that lands on the start
    point is the closing segment: it is dropped and its type moves to the
    first point. Otherwise the contour closes with an implicit line.

    Args:
        contour: Contour in design space

    Returns:
        Points ready to be drawn into a GLIF point pen
    """
    points = list(contour.points)
    if not points:
        return []

    first, rest = points[0], points[1:]

    if not contour.closed:
        return [Point(first.x, first.y, PointType.MOVE), *rest]

    closing_type = PointType.LINE
    if rest and rest[-1].is_on_curve and rest[-1].to_tuple() == first.to_tuple():
        closing_type = rest[-1].point_type
        rest = rest[:-1]
    return [Point(first.x, first.y, closing_type), *rest]


def draw_glyph_points(glyph: Glyph, pen: Any) -> None:
    """Draw a glyph's contours into a point pen.

    Args:
        glyph: Glyph in design space
        pen: Any fontTools point pen
    """
    for contour in glyph.contours:
        points = contour_to_glif_points(contour)
        if not points:
            continue
        pen.beginPath()
        for point in points:
            segment_type = point.point_type.value if point.is_on_curve else None
            pen.addPoint(
                (format_number(point.x), format_number(point.y)),
                segmentType=segment_type,
                smooth=False,
            )
        pen.endPath()


def glyph_to_glif(glyph: Glyph) -> bytes:
    """Serialize a glyph into a GLIF format 2 document.

    Element order follows the GLIF schema: advance, unicode, anchors,
    outline. Output is deterministic for a given glyph.

    Args:
        glyph: Glyph in design space

    Returns:
        UTF-8 encoded GLIF document
    """
    text = writeGlyphToString(
        glyph.name,
        glyphObject=_GlifGlyphObject(glyph),
        drawPointsFunc=lambda pen: draw_glyph_points(glyph, pen),
    )
    return text.encode("utf-8")
