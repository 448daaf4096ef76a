"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphpath.domain.text import TextMetrics
from glyphpath.io.font import ParsedFont

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
    console.print(f"\n[bold]glyphpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font: ParsedFont) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font: The parsed font
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font.format})")
    console.print(line1)
    if font.family_name:
        console.print(f"  Family {SYM_DOT} {font.family_name}")
    console.print(f"  {font.glyph_count:,} glyphs {SYM_DOT} {font.units_per_em:,} UPM")
    console.print(f"  Ascender {font.ascender} {SYM_DOT} Descender {font.descender}")


def print_metrics(text: str, size: float, metrics: TextMetrics) -> None:
    """Print measured text metrics as a table.

    Args:
        text: The measured string
        size: Font size in pixels
        metrics: Measurement result
    """
    table = Table(title=f"{text!r} at {size:g}px", title_justify="left")
    table.add_column("Metric")
    table.add_column("Pixels", justify="right")
    table.add_row("width", f"{metrics.width:.3f}")
    table.add_row("emHeightAscent", f"{metrics.em_height_ascent:.3f}")
    table.add_row("emHeightDescent", f"{metrics.em_height_descent:.3f}")
    console.print(table)


def print_success(output_path: str, contours: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        contours: Number of contours painted
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" {SYM_DOT} {contours} contours")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
