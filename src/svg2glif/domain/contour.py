"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout svg2glif:
- PointType: Enum for the role of a point on a contour
- Point: A 2D point with point type information
- Contour: An open or closed sequence of points
"""

from dataclasses import dataclass
from enum import Enum

from svg2glif.exceptions import ContourError


class PointType(Enum):
    """Point type on a contour.

    Values match the GLIF ``type`` attribute:
    - MOVE: First point of an open contour
    - LINE: On-curve point ending a straight segment
    - CURVE: On-curve point ending a cubic Bezier segment
    - OFF_CURVE: Cubic Bezier control point
    """

    MOVE = "move"
    LINE = "line"
    CURVE = "curve"
    OFF_CURVE = "offcurve"

    @property
    def is_on_curve(self) -> bool:
        """True for points that lie on the outline."""
        return self is not PointType.OFF_CURVE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
        point_type: Role of the point on its contour
    """

    x: float
    y: float
    point_type: PointType = PointType.LINE

    @property
    def is_on_curve(self) -> bool:
        """True if the point lies on the outline."""
        return self.point_type.is_on_curve

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def with_position(self, x: float, y: float) -> "Point":
        """Return a copy of this point moved to (x, y), keeping its type."""
        return Point(x, y, self.point_type)


@dataclass(frozen=True)
class Contour:
    """An ordered sequence of points forming one subpath.

    A closed contour implicitly returns from its last point to its first
    point. Open contours start with a MOVE point.

    Attributes:
        points: Points in drawing order
        closed: Whether the contour was closed with a closepath command

    Raises:
        ContourError: If the contour has points but none of them is on-curve
    """

    points: tuple[Point, ...]
    closed: bool = False

    def __post_init__(self) -> None:
        if self.points and not any(p.is_on_curve for p in self.points):
            raise ContourError("A contour made only of off-curve points is invalid")

    def __len__(self) -> int:
        return len(self.points)

    @property
    def on_curve_points(self) -> list[Point]:
        """Points that lie on the outline."""
        return [p for p in self.points if p.is_on_curve]

    @property
    def off_curve_points(self) -> list[Point]:
        """Bezier control points."""
        return [p for p in self.points if not p.is_on_curve]
