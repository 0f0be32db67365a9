"""Configuration management for svg2glif.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or directly by library
callers.

Key classes:
- ConversionConfig: Em metrics and glyph metadata for one conversion
- LoggingConfig: Logging settings
- Svg2GlifSettings: Main application settings
"""

from svg2glif.config.settings import (
    ConversionConfig,
    LoggingConfig,
    Svg2GlifSettings,
    get_default_settings,
)

__all__ = [
    "ConversionConfig",
    "LoggingConfig",
    "Svg2GlifSettings",
    "get_default_settings",
]
