"""Contour building from parsed path commands.

The ContourBuilder walks a PathCommand sequence and groups its points into
contours, keeping cubic control points inline between on-curve points the
way GLIF stores them.
"""

import logging
from collections.abc import Iterable

from svg2glif.domain import (
    ClosePath,
    Contour,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    PointType,
)

logger = logging.getLogger(__name__)


class ContourBuilder:
    """Collects points into contours while walking path commands.

    Example:
        builder = ContourBuilder()
        builder.feed(parse_path("M 0 0 L 10 0 L 10 10 Z"))
        contours = builder.finish()
    """

    def __init__(self) -> None:
        self._contours: list[Contour] = []
        self._points: list[Point] = []
        self._dropped = 0

    def feed(self, commands: Iterable[PathCommand]) -> None:
        """Consume path commands.

        Args:
            commands: Absolute commands from the path parser
        """
        for command in commands:
            if isinstance(command, MoveTo):
                self._move_to(command)
            elif isinstance(command, LineTo):
                self._points.append(Point(*command.point, PointType.LINE))
            elif isinstance(command, CurveTo):
                self._points.append(Point(*command.control1, PointType.OFF_CURVE))
                self._points.append(Point(*command.control2, PointType.OFF_CURVE))
                self._points.append(Point(*command.end, PointType.CURVE))
            elif isinstance(command, ClosePath):
                self._close_path()
            else:
                raise TypeError(f"Unknown path command: {command!r}")

    def finish(self) -> list[Contour]:
        """Emit any trailing open contour and return all contours.

        Returns:
            Contours in path order
        """
        if self._points:
            self._emit(closed=False)
        if self._dropped:
            logger.debug("Dropped %d zero-length subpaths", self._dropped)
        return list(self._contours)

    def _move_to(self, command: MoveTo) -> None:
        if len(self._points) > 1:
            self._emit(closed=False)
        elif self._points:
            # A moveto followed directly by another moveto draws nothing
            self._points = []
            self._dropped += 1
        self._points.append(Point(*command.point, PointType.MOVE))

    def _close_path(self) -> None:
        if not self._points:
            return
        self._emit(closed=True)

    def _emit(self, closed: bool) -> None:
        self._contours.append(Contour(points=tuple(self._points), closed=closed))
        self._points = []


def build_contours(commands: Iterable[PathCommand]) -> list[Contour]:
    """Build contours from a sequence of path commands.

    Args:
        commands: Absolute commands from the path parser

    Returns:
        Contours in path order; open contours start with a MOVE point
    """
    builder = ContourBuilder()
    builder.feed(commands)
    return builder.finish()
