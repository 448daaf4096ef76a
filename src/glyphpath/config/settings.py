"""Configuration settings for glyphpath."""

from pathlib import Path

from pydantic import BaseModel, Field

from glyphpath.domain.text import TextAlign, TextBaseline


class TextConfig(BaseModel):
    """Initial text state of a drawing context."""

    default_family: str = Field(
        default="sans-serif",
        description="Font family selected before the caller sets one",
    )
    default_size: float = Field(
        default=10.0,
        gt=0.0,
        description="Font size in pixels selected before the caller sets one",
    )
    text_align: TextAlign = Field(
        default=TextAlign.START,
        description="Horizontal alignment relative to the anchor point",
    )
    text_baseline: TextBaseline = Field(
        default=TextBaseline.ALPHABETIC,
        description="Vertical alignment relative to the anchor point",
    )


class SVGConfig(BaseModel):
    """Configuration for SVG output."""

    padding: float = Field(
        default=4.0,
        ge=0.0,
        description="Blank space around the drawing in pixels",
    )
    fill_color: str = Field(
        default="#000000",
        description="Fill color for filled contours",
    )
    stroke_color: str = Field(
        default="#000000",
        description="Stroke color for stroked contours",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width for stroked contours",
    )


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


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    text: TextConfig = Field(default_factory=TextConfig)
    svg: SVGConfig = Field(default_factory=SVGConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
