"""SVG to Glyph conversion pipeline.

convert() is the pure, in-memory entry point of svg2glif: SVG markup in,
Glyph out. Reading the SVG file and writing the GLIF file are left to the
io layer.

The pipeline runs in two phases. Extraction parses the document and
collects contours and anchors in SVG space. The coordinate transform is then
applied exactly once to every point.
"""

import logging
from typing import Any

from fontTools.misc import etree

from svg2glif.config import ConversionConfig
from svg2glif.core.anchors import extract_anchors
from svg2glif.core.builder import build_contours
from svg2glif.core.path_parser import parse_path
from svg2glif.core.svg import Offset, iter_elements, parse_length
from svg2glif.core.transform import transform_anchor, transform_contour
from svg2glif.domain import Contour, Glyph, GlyphMetadata
from svg2glif.exceptions import SvgParseError

logger = logging.getLogger(__name__)

DEFAULT_GLYPH_NAME = "svgglyph"


def parse_svg(svg_document: str | bytes) -> Any:
    """Parse SVG markup into an element tree.

    Args:
        svg_document: SVG markup as text or bytes

    Returns:
        Root element of the document

    Raises:
        SvgParseError: If the markup is not well-formed XML
    """
    data = svg_document.encode("utf-8") if isinstance(svg_document, str) else svg_document
    try:
        return etree.fromstring(data)
    except Exception as e:
        raise SvgParseError(str(e) or type(e).__name__) from e


def extract_contours(root: Any) -> list[tuple[Contour, Offset]]:
    """Parse every path element into contours, in document order.

    Args:
        root: Root element of the parsed SVG document

    Returns:
        List of (contour in SVG space, translation of its path element)
    """
    contours: list[tuple[Contour, Offset]] = []
    for name, element, offset in iter_elements(root):
        if name != "path":
            continue
        data = element.get("d")
        if data is None:
            continue
        path_contours = build_contours(parse_path(data))
        logger.debug(
            "Path %s: %d contours", element.get("id", "<unnamed>"), len(path_contours)
        )
        contours.extend((contour, offset) for contour in path_contours)
    return contours


def _advance_width(root: Any, config: ConversionConfig) -> float:
    if config.advance_width is not None:
        return config.advance_width
    width = parse_length(root.get("width"))
    if width is None:
        logger.debug("No usable SVG width, advance width set to 0")
        return 0
    return width


def convert(
    svg_document: str | bytes,
    config: ConversionConfig,
    glyph_name: str | None = None,
) -> Glyph:
    """Convert SVG markup into a Glyph in design space.

    Args:
        svg_document: SVG markup as text or bytes
        config: Conversion settings
        glyph_name: Fallback glyph name when the config has none
            (typically the input file stem)

    Returns:
        Glyph with contours in path order and anchors in text order

    Raises:
        ConversionError: Any subclass, for malformed or unsupported input
    """
    root = parse_svg(svg_document)

    svg_contours = extract_contours(root)
    svg_anchors = extract_anchors(root)

    contours = tuple(
        transform_contour(contour, config, offset) for contour, offset in svg_contours
    )
    anchors = tuple(transform_anchor(anchor, config) for anchor in svg_anchors)

    metadata = GlyphMetadata(
        name=config.name or glyph_name or DEFAULT_GLYPH_NAME,
        unicode=config.codepoint,
        advance_width=_advance_width(root, config),
    )
    return Glyph(metadata=metadata, contours=contours, anchors=anchors)
