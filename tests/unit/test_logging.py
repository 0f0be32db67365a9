"""Tests for logging utilities."""

import logging
from unittest.mock import Mock

from svg2glif.utils import ConversionLogger, ConversionStats, configure_logging


class TestConversionStats:
    """Tests for ConversionStats."""

    def test_duration(self):
        """Test duration from start and end times."""
        stats = ConversionStats(start_time=10.0, end_time=12.5)

        assert stats.duration_seconds == 2.5

    def test_duration_not_finished(self):
        """Test duration is zero until the run ends."""
        assert ConversionStats(start_time=10.0).duration_seconds == 0.0


class TestConversionLogger:
    """Tests for ConversionLogger."""

    def test_complete_updates_stats(self):
        """Test a completed conversion is counted."""
        logger = Mock()
        conversion_logger = ConversionLogger(logger)

        conversion_logger.log_conversion_complete(
            glyph_name="A", contours=2, points=24, anchors=1, bytes_written=900, duration_ms=1.234
        )

        stats = conversion_logger.stats
        assert (stats.converted_count, stats.contour_count, stats.point_count) == (1, 2, 24)
        assert stats.bytes_written == 900
        assert logger.info.call_args.kwargs["duration_ms"] == 1.23

    def test_error_updates_stats(self):
        """Test a failed conversion is recorded with its message."""
        conversion_logger = ConversionLogger(Mock())

        conversion_logger.log_conversion_error("A.svg", ValueError("bad"))

        assert conversion_logger.stats.error_count == 1
        assert conversion_logger.stats.errors == [("A.svg", "bad")]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_repeated_calls_replace_handlers(self, tmp_path):
        """Test configuring twice does not stack handlers."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "a.log")
        count = len(root.handlers)

        configure_logging(log_file=tmp_path / "b.log")

        assert len(root.handlers) == count

    def test_quiet_console(self):
        """Test quiet mode raises the console threshold to errors."""
        configure_logging(console_level="DEBUG", quiet=True)

        console = logging.getLogger().handlers[-1]
        assert console.level == logging.ERROR
