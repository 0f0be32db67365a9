"""Tests for file-level conversion orchestration."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from svg2glif.config import ConversionConfig, Svg2GlifSettings
from svg2glif.core.processor import SvgProcessor
from svg2glif.exceptions import GlifSaveError, SvgLoadError, UnsupportedCommandError

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
    '<path d="M 10 10 L 90 10 L 90 90 L 10 90 Z"/>'
    '<g transform="translate(50,0)"><text>top</text></g>'
    "</svg>"
)


@pytest.fixture
def settings() -> Svg2GlifSettings:
    """Create test settings."""
    return Svg2GlifSettings(conversion=ConversionConfig(units_per_em=1000, descent=0))


@pytest.fixture
def square_svg(tmp_path: Path) -> Path:
    """Write an SVG with one square and one anchor."""
    path = tmp_path / "square.svg"
    path.write_text(SQUARE_SVG, encoding="utf-8")
    return path


class TestSvgProcessor:
    """Tests for SvgProcessor class."""

    def test_init(self, settings):
        """Test processor initialization with an explicit logger."""
        logger = Mock()
        processor = SvgProcessor(settings, logger=logger)

        assert processor.settings == settings
        assert processor.logger is logger

    def test_convert_file(self, settings, square_svg):
        """Test converting a file uses its stem as glyph name."""
        glyph = SvgProcessor(settings, logger=Mock()).convert_file(square_svg)

        assert glyph.name == "square"
        assert len(glyph.contours) == 1
        assert glyph.get_anchor_names() == ["top"]

    def test_process_writes_glif(self, settings, square_svg, tmp_path):
        """Test processing writes the output file and fills statistics."""
        output = tmp_path / "out.glif"

        stats = SvgProcessor(settings, logger=Mock()).process(square_svg, output)

        assert output.exists()
        assert stats.converted_count == 1
        assert stats.error_count == 0
        assert stats.contour_count == 1
        assert stats.point_count == 4
        assert stats.anchor_count == 1
        assert stats.bytes_written == output.stat().st_size
        assert stats.duration_seconds >= 0

    def test_default_output_path(self, settings, square_svg):
        """Test the output defaults to the input path with .glif."""
        SvgProcessor(settings, logger=Mock()).process(square_svg)

        assert square_svg.with_suffix(".glif").exists()

    def test_missing_input(self, settings, tmp_path):
        """Test a missing SVG raises SvgLoadError."""
        processor = SvgProcessor(settings, logger=Mock())

        with pytest.raises(SvgLoadError) as exc_info:
            processor.process(tmp_path / "missing.svg", tmp_path / "missing.glif")

        assert "missing.svg" in exc_info.value.path
        assert not (tmp_path / "missing.glif").exists()

    def test_conversion_error_writes_nothing(self, settings, tmp_path):
        """Test an unsupported command fails without creating the output."""
        svg = tmp_path / "bad.svg"
        svg.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg"><path d="M 0 0 Q 1 1 2 2"/></svg>',
            encoding="utf-8",
        )
        output = tmp_path / "bad.glif"
        processor = SvgProcessor(settings, logger=Mock())

        with pytest.raises(UnsupportedCommandError):
            processor.process(svg, output)

        assert not output.exists()
        assert processor.conversion_logger.stats.error_count == 1
        assert processor.conversion_logger.stats.converted_count == 0

    def test_save_error(self, settings, square_svg, tmp_path):
        """Test an unwritable output raises GlifSaveError."""
        output = tmp_path / "missing_dir" / "out.glif"

        with pytest.raises(GlifSaveError) as exc_info:
            SvgProcessor(settings, logger=Mock()).process(square_svg, output)

        assert exc_info.value.path == str(output)

    def test_errors_are_logged(self, settings, tmp_path):
        """Test failures are reported to the structured logger."""
        logger = Mock()
        processor = SvgProcessor(settings, logger=logger)

        with pytest.raises(SvgLoadError):
            processor.process(tmp_path / "missing.svg")

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["error_type"] == "SvgLoadError"

    @patch("svg2glif.core.processor.GlifWriter")
    def test_writer_receives_glyph(self, mock_writer_class, settings, square_svg):
        """Test the converted glyph is handed to the writer."""
        mock_writer = Mock()
        mock_writer.write.return_value = 123
        mock_writer_class.return_value = mock_writer
        mock_writer_class.get_glif_path.return_value = Path("square.glif")

        stats = SvgProcessor(settings, logger=Mock()).process(square_svg)

        mock_writer_class.assert_called_once_with(Path("square.glif"))
        (glyph,), _ = mock_writer.write.call_args
        assert glyph.name == "square"
        assert stats.bytes_written == 123
