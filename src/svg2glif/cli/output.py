"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted status and error messages.
"""


from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svg2glif[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_conversion_info(
    svg_path: str, units_per_em: float, descent: float, unicode: str | None
) -> None:
    """Print the input file and em settings.

    Args:
        svg_path: Path to the SVG file
        units_per_em: Units per em
        descent: Descent
        unicode: Hex code point, if any
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(svg_path)
    console.print(line1)
    line2 = f"  {units_per_em:g} UPM {SYM_DOT} descent {descent:g}"
    if unicode is not None:
        line2 += f" {SYM_DOT} U+{int(unicode, 16):04X}"
    console.print(line2)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    contours: int,
    points: int,
    anchors: int,
    verbose: bool = False,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total conversion time in seconds
        contours: Number of contours written
        points: Number of points written
        anchors: Number of anchors written
        verbose: Whether to show the point count
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    stats_line = f"  {contours} contours {SYM_DOT} {anchors} anchors"
    if verbose:
        stats_line += f" {SYM_DOT} {points} points"
    console.print(stats_line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages carry file paths and SVG snippets, never markup
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
