"""Utility functions for svg2glif.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics
"""

from svg2glif.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
