"""Drawing commands parsed from SVG path data.

This module defines the closed set of path commands produced by the path
parser. All coordinates are absolute and expressed in SVG space: relative
command letters are resolved against the current point while parsing.

- MoveTo: start a new subpath
- LineTo: straight segment to a point
- CurveTo: cubic Bezier segment with two control points
- ClosePath: close the current subpath
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``point``."""

    point: tuple[float, float]


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``point``."""

    point: tuple[float, float]


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier segment from the current point to ``end``.

    Attributes:
        control1: First control point
        control2: Second control point
        end: End point of the segment
    """

    control1: tuple[float, float]
    control2: tuple[float, float]
    end: tuple[float, float]


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its first point."""


PathCommand = MoveTo | LineTo | CurveTo | ClosePath
