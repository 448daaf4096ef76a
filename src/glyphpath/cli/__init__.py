"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font information (format, glyph count, vertical metrics)
- Text measurement as a table or JSON
- Rendering text outlines to SVG
"""

from glyphpath.cli.app import cli, main

__all__ = ["cli", "main"]
