"""svg2glif - Convert SVG glyph drawings to UFO GLIF files.

svg2glif reads an SVG drawing of a single glyph, converts its paths into
GLIF contours in font design space and turns its text elements into named
anchors.

Example:
    $ svg2glif -i A.svg -o A.glif --em-size 1000 --descent 200 --unicode 0041

This will create A.glif with the outline of A.svg placed above the baseline.
"""

__version__ = "0.1.0"

from svg2glif.config import ConversionConfig
from svg2glif.core.converter import convert

__all__ = ["ConversionConfig", "__version__", "convert"]
