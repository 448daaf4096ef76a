"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TextConfig: Initial font and alignment state of a text context
- SVGConfig: SVG output settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    GlyphPathSettings,
    LoggingConfig,
    SVGConfig,
    TextConfig,
    get_default_settings,
)

__all__ = [
    "GlyphPathSettings",
    "LoggingConfig",
    "SVGConfig",
    "TextConfig",
    "get_default_settings",
]
