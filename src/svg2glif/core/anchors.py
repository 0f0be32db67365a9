"""Anchor extraction from SVG text elements.

Each ``<text>`` element names one anchor. The text content is the anchor
name. The anchor position is the text element's own ``x``/``y`` (0 when
absent) moved by the translation of the element and its enclosing groups:

    <g transform="translate(250,700)"><text>top</text></g>

gives an anchor "top" at SVG position (250, 700). Positions returned here
are still in SVG space; the converter maps them to design space.
"""

import logging
import math
from typing import Any

from svg2glif.core.svg import Offset, iter_elements, parse_length
from svg2glif.domain import Anchor
from svg2glif.exceptions import EmptyAnchorNameError, UnsupportedTransformError

logger = logging.getLogger(__name__)


def _text_coordinate(value: str | None) -> float:
    # x and y may list one position per character; the first one places the text
    tokens = [] if value is None else value.replace(",", " ").split()
    if not tokens:
        return 0.0
    length = parse_length(tokens[0])
    return 0.0 if length is None else length


def anchor_from_text(element: Any, offset: Offset, index: int) -> Anchor:
    """Build an anchor from one text element.

    Args:
        element: The ``<text>`` element
        offset: Accumulated translation of the element
        index: Position of the element among the document's text elements

    Returns:
        Anchor in SVG space

    Raises:
        EmptyAnchorNameError: If the text content is blank
        UnsupportedTransformError: If the position overflows
    """
    name = "".join(element.itertext()).strip()
    if not name:
        raise EmptyAnchorNameError(index)
    x = _text_coordinate(element.get("x")) + offset[0]
    y = _text_coordinate(element.get("y")) + offset[1]
    if not (math.isfinite(x) and math.isfinite(y)):
        raise UnsupportedTransformError("translate out of range", element.get("transform"))
    return Anchor(name=name, x=x, y=y)


def extract_anchors(root: Any) -> list[Anchor]:
    """Extract one anchor per text element, in document order.

    Duplicate names are kept.

    Args:
        root: Root element of the parsed SVG document

    Returns:
        Anchors in SVG space
    """
    anchors: list[Anchor] = []
    for name, element, offset in iter_elements(root):
        if name != "text":
            continue
        anchor = anchor_from_text(element, offset, len(anchors))
        logger.debug("Found anchor %r at (%s, %s)", anchor.name, anchor.x, anchor.y)
        anchors.append(anchor)
    return anchors
