"""Configuration management for shapeclip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Kernel tolerances
- OutputConfig: Output format and SVG styling
- LoggingConfig: Logging settings
- ShapeclipSettings: Main application settings
"""

from shapeclip.config.settings import (
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ShapeclipSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "ShapeclipSettings",
    "get_default_settings",
]
