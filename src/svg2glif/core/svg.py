"""SVG document helpers: element walking, translations and lengths.

The converter only understands translations. Every element that can carry
drawable content is visited in document order together with the sum of the
translate() transforms of itself and its ancestors.
"""

import math
import re
from collections.abc import Iterator
from typing import Any

from svg2glif.exceptions import UnsupportedTransformError

# Containers whose content is never drawn directly
HIDDEN_CONTAINERS = frozenset({"defs", "clipPath", "mask", "symbol", "pattern", "marker"})

# Elements whose transform matters even without children
CONTENT_ELEMENTS = frozenset({"path", "text"})

_FUNCTION_RE = re.compile(r"\s*([A-Za-z][A-Za-z0-9]*)\s*\(([^)]*)\)\s*,?")
_ARGUMENT_SPLIT_RE = re.compile(r"[\s,]+")
_LENGTH_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px)?\s*"
)

Offset = tuple[float, float]


def local_name(element: Any) -> str | None:
    """Return the tag name without namespace, or None for comments and PIs."""
    tag = element.tag
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


def parse_translate(value: str) -> Offset:
    """Parse a transform attribute made only of translate() functions.

    Several translations in one attribute are added together.

    Args:
        value: Value of a ``transform`` attribute

    Returns:
        Total (tx, ty) translation

    Raises:
        UnsupportedTransformError: If any function is not a two-argument
            translate, the attribute cannot be parsed, or the total is out
            of range
    """
    total_x = total_y = 0.0
    pos = 0
    text = value.strip()

    while pos < len(text):
        match = _FUNCTION_RE.match(text, pos)
        if match is None:
            function = text[pos:].split("(", 1)[0].strip() or text[pos:].strip()
            raise UnsupportedTransformError(function, value)

        function, raw_args = match.groups()
        if function != "translate":
            raise UnsupportedTransformError(function, value)

        args = [arg for arg in _ARGUMENT_SPLIT_RE.split(raw_args.strip()) if arg]
        if len(args) != 2:
            raise UnsupportedTransformError(f"translate with {len(args)} argument(s)", value)
        try:
            tx, ty = float(args[0]), float(args[1])
        except ValueError as e:
            raise UnsupportedTransformError("translate with non-numeric arguments", value) from e

        total_x += tx
        total_y += ty
        if not (math.isfinite(total_x) and math.isfinite(total_y)):
            raise UnsupportedTransformError("translate out of range", value)
        pos = match.end()

    return (total_x, total_y)


def iter_elements(root: Any, offset: Offset = (0.0, 0.0)) -> Iterator[tuple[str, Any, Offset]]:
    """Walk drawable elements in document order.

    Text elements are yielded but not descended into, since their children
    (tspan, character data) belong to the text itself. Hidden containers
    such as ``<defs>`` are skipped with their whole subtree.

    Args:
        root: Root element of the parsed SVG document
        offset: Translation inherited from outside ``root``

    Yields:
        Tuples of (local tag name, element, accumulated translation)

    Raises:
        UnsupportedTransformError: If an element on the way carries a
            transform other than translate(), or the accumulated
            translation is out of range
    """
    # Iterative walk, nesting depth is unbounded
    stack: list[tuple[Any, Offset]] = [(root, offset)]
    while stack:
        element, offset = stack.pop()
        name = local_name(element)
        if name is None or name in HIDDEN_CONTAINERS:
            continue

        transform = element.get("transform")
        if transform and transform.strip() and (name in CONTENT_ELEMENTS or len(element)):
            tx, ty = parse_translate(transform)
            offset = (offset[0] + tx, offset[1] + ty)
            if not (math.isfinite(offset[0]) and math.isfinite(offset[1])):
                raise UnsupportedTransformError("translate out of range", transform)

        yield name, element, offset

        if name != "text":
            stack.extend((child, offset) for child in reversed(list(element)))


def parse_length(value: str | None) -> float | None:
    """Parse a unitless or pixel SVG length.

    Args:
        value: Attribute value such as "100" or "64px"

    Returns:
        The length as a float, or None if missing, out of range or in
        another unit
    """
    if value is None:
        return None
    match = _LENGTH_RE.fullmatch(value)
    if match is None:
        return None
    length = float(match.group(1))
    if not math.isfinite(length):
        return None
    return length
