"""Logging utilities for svg2glif."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    converted_count: int = 0
    error_count: int = 0
    contour_count: int = 0
    point_count: int = 0
    anchor_count: int = 0
    bytes_written: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svg2glif")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_conversion_start(self, input_path: str, output_path: str) -> None:
        """Log start of a conversion."""
        self._logger.debug("Converting SVG", input=input_path, output=output_path)

    def log_conversion_complete(
        self,
        glyph_name: str,
        contours: int,
        points: int,
        anchors: int,
        bytes_written: int,
        duration_ms: float,
    ) -> None:
        """Log a successful conversion."""
        self._logger.info(
            "Glyph converted",
            glyph=glyph_name,
            contours=contours,
            points=points,
            anchors=anchors,
            bytes=bytes_written,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.converted_count += 1
        self._stats.contour_count += contours
        self._stats.point_count += points
        self._stats.anchor_count += anchors
        self._stats.bytes_written += bytes_written

    def log_conversion_error(self, input_path: str, error: Exception) -> None:
        """Log a failed conversion."""
        self._logger.error(
            "Conversion failed",
            input=input_path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((input_path, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
