"""Configuration settings for svg2glif."""

import math
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from svg2glif.exceptions import InvalidConfigError, InvalidUnicodeError

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)

_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,6}")


class ConversionConfig(BaseModel):
    """Settings for a single SVG to GLIF conversion.

    Constructed once per conversion and shared read-only by every stage
    of the pipeline.
    """

    model_config = ConfigDict(frozen=True)

    units_per_em: float = Field(
        description="Units per em (typically 1000 or 2048)",
    )
    descent: float = Field(
        description="Descent used to place the glyph above the baseline",
    )
    unicode: str | None = Field(
        default=None,
        description="Unicode codepoint in hex (e.g. 0041 for 'A')",
    )
    name: str | None = Field(
        default=None,
        description="Glyph name (default: input file stem)",
    )
    advance_width: float | None = Field(
        default=None,
        description="Advance width (default: SVG width attribute)",
    )

    @field_validator("units_per_em", "descent", "advance_width", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name == "advance_width":
            return value
        if isinstance(value, int | float):
            return value
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(info.field_name, f"must be a number, got {value!r}") from e

    @field_validator("unicode", mode="before")
    @classmethod
    def _require_unicode_text(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, str):
            raise InvalidUnicodeError(str(value), "expected a hexadecimal string")
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _require_name_text(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, str):
            raise InvalidConfigError("name", f"must be a string, got {value!r}")
        return value

    @field_validator("units_per_em")
    @classmethod
    def _check_units_per_em(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise InvalidConfigError("units_per_em", f"must be a positive number, got {value}")
        return value

    @field_validator("descent")
    @classmethod
    def _check_descent(cls, value: float) -> float:
        if not math.isfinite(value):
            raise InvalidConfigError("descent", f"must be a finite number, got {value}")
        return value

    @field_validator("advance_width")
    @classmethod
    def _check_advance_width(cls, value: float | None) -> float | None:
        if value is not None and (not math.isfinite(value) or value < 0):
            raise InvalidConfigError(
                "advance_width", f"must be a non-negative number, got {value}"
            )
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise InvalidConfigError("name", "must not be empty")
        return value

    @field_validator("unicode")
    @classmethod
    def _check_unicode(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not _HEX_RE.fullmatch(value):
            raise InvalidUnicodeError(value, "expected 1 to 6 hexadecimal digits")
        codepoint = int(value, 16)
        if codepoint > MAX_CODEPOINT:
            raise InvalidUnicodeError(value, "outside the Unicode range U+0000..U+10FFFF")
        if codepoint in SURROGATE_RANGE:
            raise InvalidUnicodeError(value, "surrogate code points are not characters")
        return value

    @property
    def codepoint(self) -> int | None:
        """Return the configured code point as an integer, if any."""
        if self.unicode is None:
            return None
        return int(self.unicode, 16)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class Svg2GlifSettings(BaseModel):
    """Main application settings."""

    conversion: ConversionConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings(units_per_em: float = 1000, descent: float = 0) -> Svg2GlifSettings:
    """Get default application settings for the given em metrics."""
    return Svg2GlifSettings(
        conversion=ConversionConfig(units_per_em=units_per_em, descent=descent)
    )
