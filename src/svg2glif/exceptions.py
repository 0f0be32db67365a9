"""Exception hierarchy for svg2glif."""


class Svg2GlifError(Exception):
    """Base exception for all svg2glif errors."""

    pass


class ConversionError(Svg2GlifError):
    """Errors that make a single SVG to GLIF conversion fail."""

    pass


class PathParseError(ConversionError):
    """Malformed path data in a ``d`` attribute."""

    def __init__(self, message: str, position: int) -> None:
        self.message = message
        self.position = position
        super().__init__(f"Invalid path data at position {position}: {message}")


class UnsupportedCommandError(ConversionError):
    """A valid SVG path command that the converter does not implement."""

    def __init__(self, letter: str, position: int) -> None:
        self.letter = letter
        self.position = position
        super().__init__(
            f"Unsupported path command '{letter}' at position {position}"
        )


class UnsupportedTransformError(ConversionError):
    """A transform other than a two-argument translate()."""

    def __init__(self, function: str, transform: str | None = None) -> None:
        self.function = function
        self.transform = transform
        message = f"Unsupported transform '{function}'"
        if transform is not None:
            message += f" in \"{transform}\""
        super().__init__(message)


class EmptyAnchorNameError(ConversionError):
    """A text element whose content is empty after trimming."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Text element #{index} has an empty anchor name")


class InvalidUnicodeError(ConversionError):
    """A unicode value that is not a single Unicode scalar value."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid unicode '{value}': {reason}")


class InvalidConfigError(ConversionError):
    """A conversion setting outside its valid range."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class SvgParseError(ConversionError):
    """The SVG document is not well-formed XML."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse SVG document: {reason}")


class ContourError(ConversionError):
    """Error with contour data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SvgFileError(Svg2GlifError):
    """Errors related to reading SVG or writing GLIF files."""

    pass


class SvgLoadError(SvgFileError):
    """Error loading an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG '{path}': {reason}")


class GlifSaveError(SvgFileError):
    """Error saving a GLIF file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save GLIF '{path}': {reason}")
