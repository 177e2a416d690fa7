"""Configuration management for glyphpreview.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Per-render drawing settings
- SourceConfig: Template loading settings
- LoggingConfig: Logging settings
- GlyphPreviewSettings: Main application settings
"""

from glyphpreview.config.settings import (
    TRANSPARENT,
    GlyphPreviewSettings,
    LoggingConfig,
    RenderConfig,
    SourceConfig,
    get_default_settings,
)

__all__ = [
    "TRANSPARENT",
    "GlyphPreviewSettings",
    "LoggingConfig",
    "RenderConfig",
    "SourceConfig",
    "get_default_settings",
]
