"""CLI application entry point for svg2glif.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svg2glif import __version__
from svg2glif.cli.output import (
    console,
    print_conversion_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from svg2glif.config import ConversionConfig, LoggingConfig, Svg2GlifSettings
from svg2glif.core import SvgProcessor
from svg2glif.exceptions import (
    ConversionError,
    GlifSaveError,
    Svg2GlifError,
    SvgLoadError,
)
from svg2glif.io import GlifWriter
from svg2glif.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="svg2glif",
    help="Convert SVG-based glyph drawings to UFO's GLIF format.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svg2glif[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def svg2glif(
    input_svg: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="Input SVG file",
            show_default=False,
        ),
    ],
    em_size: Annotated[
        float,
        typer.Option(
            "--em-size",
            "-e",
            help="Units per em (typically 1000 or 2048)",
            show_default=False,
        ),
    ],
    descent: Annotated[
        float,
        typer.Option(
            "--descent",
            "-d",
            help="Descent value used to place the glyph above the baseline",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output GLIF file (default: {input}.glif)",
        ),
    ] = None,
    unicode: Annotated[
        str | None,
        typer.Option(
            "--unicode",
            "-u",
            help="Unicode codepoint in hex (e.g., 0041 for 'A')",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Glyph name (default: input file name)",
        ),
    ] = None,
    advance_width: Annotated[
        float | None,
        typer.Option(
            "--advance-width",
            "-w",
            help="Advance width (default: SVG width attribute)",
            min=0.0,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert an SVG glyph drawing to a GLIF file.

    Paths become contours and text elements become anchors named after
    their text, positioned by the translate() of their enclosing group.

    Example:
        svg2glif -i A.svg -o A.glif -e 1000 -d 200 -u 0041
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Choose one of {', '.join(LOG_LEVELS)}.",
        )
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    # Validate conversion settings
    try:
        config = ConversionConfig(
            units_per_em=em_size,
            descent=descent,
            unicode=unicode,
            name=name,
            advance_width=advance_width,
        )
    except ConversionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    settings = Svg2GlifSettings(
        conversion=config,
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level.upper(),
        ),
    )

    output_path = output if output is not None else GlifWriter.get_glif_path(input_svg)

    if not quiet:
        print_header(__version__)
        print_step("Converting")
        print_conversion_info(
            svg_path=str(input_svg),
            units_per_em=config.units_per_em,
            descent=config.descent,
            unicode=config.unicode,
        )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        processor = SvgProcessor(settings, logger=logger)
        stats = processor.process(input_svg, output_path)
    except SvgLoadError as e:
        print_error(f"Could not load SVG: {e.reason}")
        raise typer.Exit(code=1)
    except GlifSaveError as e:
        print_error(f"Could not save GLIF: {e.reason}")
        raise typer.Exit(code=1)
    except ConversionError as e:
        print_error(f"{input_svg}: {e}", details="No output file was written.")
        raise typer.Exit(code=1)
    except Svg2GlifError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            output_path=str(output_path),
            file_size=_format_file_size(output_path),
            total_time_s=stats.duration_seconds,
            contours=stats.contour_count,
            points=stats.point_count,
            anchors=stats.anchor_count,
            verbose=verbose,
        )


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "2 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
