"""Core conversion algorithms for svg2glif.

This module contains the conversion engine:

- Path parsing (SVG path data to absolute drawing commands)
- Contour building (commands to GLIF-style point lists)
- Coordinate transform (SVG space to font design space)
- Anchor extraction (text elements to named anchors)

All functions are pure: a conversion owns all of its data and shares no
state with other conversions.

Key functions:
- convert: SVG markup to Glyph
- parse_path: Path data to PathCommand list
- build_contours: PathCommand list to Contour list
- svg_to_design: Coordinate mapping to design space
- extract_anchors: Text elements to Anchor list

Key classes:
- ContourBuilder: Incremental contour construction
- SvgProcessor: File-level conversion with logging and statistics
"""

from svg2glif.core.anchors import extract_anchors
from svg2glif.core.builder import ContourBuilder, build_contours
from svg2glif.core.converter import convert, parse_svg
from svg2glif.core.path_parser import parse_path
from svg2glif.core.processor import SvgProcessor
from svg2glif.core.svg import iter_elements, parse_translate
from svg2glif.core.transform import svg_to_design, transform_anchor, transform_contour

__all__ = [
    # Builder classes
    "ContourBuilder",
    # Processor classes
    "SvgProcessor",
    # Pipeline functions
    "build_contours",
    "convert",
    "extract_anchors",
    "iter_elements",
    "parse_path",
    "parse_svg",
    "parse_translate",
    "svg_to_design",
    "transform_anchor",
    "transform_contour",
]
