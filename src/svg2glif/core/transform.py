"""Mapping from SVG space to font design space.

SVG puts the origin at the top-left corner with Y growing downwards. Font
design space puts the origin on the baseline with Y growing upwards. A point
is mapped by flipping it around the top edge of the em square and moving it
up by the descent:

    x' = x + tx
    y' = units_per_em - (y + ty) + descent

where (tx, ty) is the translation inherited from enclosing SVG elements.
X is otherwise passed through unchanged.
"""

import math

from svg2glif.config import ConversionConfig
from svg2glif.core.svg import Offset
from svg2glif.domain import Anchor, Contour, Point
from svg2glif.exceptions import ContourError

NO_OFFSET: Offset = (0.0, 0.0)


def svg_to_design(
    x: float, y: float, config: ConversionConfig, offset: Offset = NO_OFFSET
) -> tuple[float, float]:
    """Map an SVG coordinate pair to design space.

    Args:
        x: SVG x coordinate
        y: SVG y coordinate
        config: Conversion settings providing units per em and descent
        offset: Translation of the enclosing SVG elements

    Returns:
        Tuple of (x, y) in design space

    Raises:
        ContourError: If the mapped position is not a finite number

    Examples:
        >>> config = ConversionConfig(units_per_em=1000, descent=0)
        >>> svg_to_design(250, 700, config)
        (250.0, 300.0)
    """
    tx, ty = offset
    design_x = x + tx
    design_y = config.units_per_em - (y + ty) + config.descent
    if not (math.isfinite(design_x) and math.isfinite(design_y)):
        raise ContourError(f"Position ({x}, {y}) is out of range in design space")
    return (design_x, design_y)


def transform_point(point: Point, config: ConversionConfig, offset: Offset = NO_OFFSET) -> Point:
    """Map a point to design space, keeping its point type."""
    return point.with_position(*svg_to_design(point.x, point.y, config, offset))


def transform_contour(
    contour: Contour, config: ConversionConfig, offset: Offset = NO_OFFSET
) -> Contour:
    """Map every point of a contour to design space."""
    return Contour(
        points=tuple(transform_point(p, config, offset) for p in contour.points),
        closed=contour.closed,
    )


def transform_anchor(anchor: Anchor, config: ConversionConfig) -> Anchor:
    """Map an anchor position to design space.

    The anchor's SVG position already includes the translation of its
    enclosing elements, so no offset is applied here.
    """
    x, y = svg_to_design(anchor.x, anchor.y, config)
    return Anchor(name=anchor.name, x=x, y=y)
