"""Configuration management for textpaths.

This module provides configuration management using Pydantic models.
Defaults reproduce the tool's fixed behavior; library users may override them.

Key classes:
- TextConfig: Font size and line height
- FontConfig: Font family or explicit font file
- NormalizationConfig: Quantization precision
- LoggingConfig: Logging settings
- TextPathsSettings: Main application settings
"""

from textpaths.config.settings import (
    FontConfig,
    LoggingConfig,
    NormalizationConfig,
    TextConfig,
    TextPathsSettings,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "LoggingConfig",
    "NormalizationConfig",
    "TextConfig",
    "TextPathsSettings",
    "get_default_settings",
]
