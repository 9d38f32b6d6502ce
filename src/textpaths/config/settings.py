"""Configuration settings for Textpaths."""

from pathlib import Path

from pydantic import BaseModel, Field


class TextConfig(BaseModel):
    """Text metrics used for shaping and layout."""

    font_size: float = Field(
        default=14.0,
        gt=0.0,
        le=1000.0,
        description="Font size in pixels",
    )
    line_height: float = Field(
        default=20.0,
        gt=0.0,
        le=2000.0,
        description="Distance between consecutive baselines in pixels",
    )


class FontConfig(BaseModel):
    """Font selection."""

    family: str = Field(
        default="sans-serif",
        description="Family name resolved through fontconfig",
    )
    font_path: Path | None = Field(
        default=None,
        description="Explicit font file (skips fontconfig lookup)",
    )
    font_index: int = Field(
        default=0,
        ge=0,
        description="Face index inside a font collection file",
    )


class NormalizationConfig(BaseModel):
    """Configuration for coordinate normalization."""

    precision: int = Field(
        default=3,
        ge=1,
        le=6,
        description="Decimal digits kept when truncating normalized coordinates",
    )

    @property
    def quantization_factor(self) -> int:
        """Multiplier applied before truncation."""
        return 10**self.precision


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


class TextPathsSettings(BaseModel):
    """Main application settings."""

    text: TextConfig = Field(default_factory=TextConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TextPathsSettings:
    """Get default application settings."""
    return TextPathsSettings()
