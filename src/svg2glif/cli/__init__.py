"""Command-line interface for svg2glif.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Em size, descent and unicode options mirroring the GLIF metadata
- Verbose/quiet output modes
- Detailed error reporting with the offending input file
"""

from svg2glif.cli.app import cli, main

__all__ = ["cli", "main"]
