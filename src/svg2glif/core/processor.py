"""File-level orchestration of SVG to GLIF conversion.

This module wires the io layer around the pure convert() function and
records conversion statistics.

Key components:
- SvgProcessor: Reads an SVG file, converts it and writes the GLIF file
"""

import time
from pathlib import Path

import structlog

from svg2glif.config import Svg2GlifSettings
from svg2glif.core.converter import convert
from svg2glif.domain import Glyph
from svg2glif.exceptions import ConversionError, GlifSaveError, SvgLoadError
from svg2glif.io import GlifWriter, SvgReader
from svg2glif.utils import ConversionLogger, ConversionStats


class SvgProcessor:
    """Orchestrates the conversion of SVG files into GLIF files.

    Manages the complete workflow:
    1. Load the SVG file
    2. Convert it into a glyph
    3. Serialize and save the GLIF file
    4. Update statistics

    Example:
        settings = Svg2GlifSettings(
            conversion=ConversionConfig(units_per_em=1000, descent=200)
        )
        processor = SvgProcessor(settings)
        stats = processor.process(Path("A.svg"), Path("A.glif"))
    """

    def __init__(
        self,
        settings: Svg2GlifSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            settings: svg2glif settings containing the conversion config
            logger: Structured logger (default: the "svg2glif" logger)
        """
        self.settings = settings
        self.logger = logger if logger is not None else structlog.get_logger("svg2glif")
        self.conversion_logger = ConversionLogger(self.logger)

    def convert_file(self, input_path: Path) -> Glyph:
        """Load and convert an SVG file without writing anything.

        Args:
            input_path: SVG file path

        Returns:
            Converted glyph

        Raises:
            SvgLoadError: If the file cannot be read
            ConversionError: If the SVG cannot be converted
        """
        reader = SvgReader(input_path)
        try:
            data = reader.load()
        except OSError as e:
            raise SvgLoadError(str(input_path), str(e)) from e

        return convert(data, self.settings.conversion, glyph_name=reader.glyph_name)

    def process(self, input_path: Path, output_path: Path | None = None) -> ConversionStats:
        """Convert an SVG file and save the result as GLIF.

        No output file is created when loading or conversion fails.

        Args:
            input_path: SVG file path
            output_path: GLIF file path (default: input path with .glif)

        Returns:
            Conversion statistics

        Raises:
            SvgLoadError: If the SVG file cannot be read
            ConversionError: If the SVG cannot be converted
            GlifSaveError: If the GLIF file cannot be written
        """
        if output_path is None:
            output_path = GlifWriter.get_glif_path(input_path)

        stats = self.conversion_logger.stats
        stats.start_time = time.time()
        self.conversion_logger.log_conversion_start(str(input_path), str(output_path))

        try:
            glyph = self.convert_file(input_path)

            writer = GlifWriter(output_path)
            try:
                bytes_written = writer.write(glyph)
            except OSError as e:
                raise GlifSaveError(str(output_path), str(e)) from e
        except (ConversionError, SvgLoadError, GlifSaveError) as e:
            self.conversion_logger.log_conversion_error(str(input_path), e)
            stats.end_time = time.time()
            raise

        stats.end_time = time.time()
        self.conversion_logger.log_conversion_complete(
            glyph_name=glyph.name,
            contours=len(glyph.contours),
            points=glyph.point_count,
            anchors=len(glyph.anchors),
            bytes_written=bytes_written,
            duration_ms=stats.duration_seconds * 1000,
        )
        return stats
