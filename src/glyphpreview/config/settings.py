"""Configuration settings for Glyphpreview."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

TRANSPARENT = "transparent"


class RenderConfig(BaseModel):
    """Configuration for a single render call.

    Frozen so one config can be shared by concurrent renders on
    different surfaces.
    """

    model_config = ConfigDict(frozen=True)

    padding: float = Field(
        default=8.0,
        ge=0.0,
        description="Space kept free on every side of the surface (px)",
    )
    stroke_width: float | None = Field(
        default=None,
        gt=0.0,
        description="Rendered stroke width in surface pixels (None = derive from surface size)",
    )
    stroke_style: str = Field(
        default="#000000",
        description="Stroke color descriptor",
    )
    background: str = Field(
        default=TRANSPARENT,
        description="Background color descriptor, or 'transparent'",
    )
    center: bool = Field(
        default=True,
        description="Center the glyph inside the padded area",
    )
    simplify: float = Field(
        default=0.0,
        ge=0.0,
        lt=1.0,
        description="Fraction of points to keep per stroke (0 = keep all)",
    )
    smooth: bool = Field(
        default=False,
        description="Round strokes with midpoint quadratic curves",
    )
    fit_to_canvas: bool = Field(
        default=True,
        description="Scale the glyph uniformly to fill the padded area",
    )

    @property
    def has_background(self) -> bool:
        """Whether the surface gets filled before drawing."""
        return self.background.strip().lower() != TRANSPARENT


class SourceConfig(BaseModel):
    """Configuration for loading template collections."""

    timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Request timeout for remote sources (seconds)",
    )
    max_size: int = Field(
        default=5 * 1024 * 1024,
        ge=1024,
        description="Maximum accepted size of a template document (bytes)",
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Directory for caching remote documents (None = no cache)",
    )
    user_agent: str = Field(
        default="glyphpreview/0.1.0",
        description="User-Agent header sent to remote sources",
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


class GlyphPreviewSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPreviewSettings:
    """Get default application settings."""
    return GlyphPreviewSettings()
