"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_metrics,
    print_step,
    print_success,
)
from glyphpath.config import GlyphPathSettings, LoggingConfig, TextConfig
from glyphpath.core import TextContext, measure
from glyphpath.domain import RecordingSurface, TextAlign, TextBaseline
from glyphpath.exceptions import FontError
from glyphpath.fonts import FontRegistry, FontResource
from glyphpath.io import SVGSurface
from glyphpath.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Measure text and turn it into glyph outline paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
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
    """Measure text and turn it into glyph outline paths."""
    settings = GlyphPathSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "quiet": quiet}


def _load_font(font_path: Path) -> tuple[FontRegistry, FontResource]:
    """Register and load a single font file, exiting on failure."""
    registry = FontRegistry()
    resource = registry.register(font_path, font_path.stem)
    try:
        resource.load_sync()
    except FontError as e:
        print_error(f"Could not load font: {font_path}", details=str(e))
        raise typer.Exit(code=1) from e
    return registry, resource


FontArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to a TTF/OTF font file",
        show_default=False,
    ),
]
TextArgument = Annotated[
    str,
    typer.Argument(
        help="Text to measure or draw",
        show_default=False,
    ),
]


@app.command()
def info(ctx: typer.Context, font_path: FontArgument) -> None:
    """Show font format, glyph count and vertical metrics."""
    _, resource = _load_font(font_path)
    font = resource.font
    if font is None:
        print_error(f"Could not load font: {font_path}")
        raise typer.Exit(code=1)

    if not ctx.obj["quiet"]:
        print_header(__version__)
    print_font_info(str(font_path), font)


@app.command("measure")
def measure_command(
    font_path: FontArgument,
    text: TextArgument,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in pixels",
            min=0.5,
        ),
    ] = 16.0,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print metrics as JSON",
        ),
    ] = False,
) -> None:
    """Measure the width, ascent and descent of TEXT."""
    _, resource = _load_font(font_path)
    metrics = measure(resource, text, size)

    if json_output:
        console.print_json(data={"text": text, "size": size, **metrics.to_dict()})
    else:
        print_metrics(text, size, metrics)


@app.command()
def render(
    ctx: typer.Context,
    font_path: FontArgument,
    text: TextArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {font name}.svg)",
        ),
    ] = None,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in pixels",
            min=0.5,
        ),
    ] = 48.0,
    align: Annotated[
        str,
        typer.Option(
            "--align",
            "-a",
            help="Horizontal alignment (start|left|end|right|center)",
        ),
    ] = "start",
    baseline: Annotated[
        str,
        typer.Option(
            "--baseline",
            "-b",
            help="Vertical alignment (alphabetic|top|middle|bottom)",
        ),
    ] = "alphabetic",
    stroke: Annotated[
        bool,
        typer.Option(
            "--stroke",
            help="Stroke outlines instead of filling them",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Count path commands without writing a file",
        ),
    ] = False,
) -> None:
    """Draw TEXT as glyph outlines into an SVG file."""
    try:
        text_align = TextAlign(align.lower())
        text_baseline = TextBaseline(baseline.lower())
    except ValueError as e:
        print_error(
            f"Invalid alignment: {e}",
            details="align: start, left, end, right, center; "
            "baseline: alphabetic, top, middle, bottom",
        )
        raise typer.Exit(code=1) from e

    quiet = ctx.obj["quiet"]
    base_settings: GlyphPathSettings = ctx.obj["settings"]
    settings = base_settings.model_copy(
        update={
            "text": TextConfig(
                default_family=font_path.stem,
                default_size=size,
                text_align=text_align,
                text_baseline=text_baseline,
            )
        }
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading font")
    registry, resource = _load_font(font_path)
    if not quiet and resource.font is not None:
        print_font_info(str(font_path), resource.font)

    if dry_run:
        recorder = RecordingSurface()
        draw_ctx = TextContext(recorder, registry, settings)
        contours = draw_ctx.stroke_text(text, 0, 0) if stroke else draw_ctx.fill_text(text, 0, 0)
        console.print(f"\n  {len(recorder.calls)} surface calls, {contours} contours")
        raise typer.Exit(code=0)

    surface = SVGSurface(settings.svg)
    draw_ctx = TextContext(surface, registry, settings)
    if stroke:
        contours = draw_ctx.stroke_text(text, 0, 0)
    else:
        contours = draw_ctx.fill_text(text, 0, 0)

    output_path = output if output is not None else Path(f"{font_path.stem}.svg")
    if not quiet:
        print_step("Writing SVG")
    try:
        surface.save(output_path)
    except OSError as e:
        print_error(f"Could not write {output_path}", details=str(e))
        raise typer.Exit(code=1) from e

    if not quiet:
        print_success(str(output_path), contours)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
