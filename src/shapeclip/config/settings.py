"""Configuration settings for shapeclip."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Output file format."""

    SVG = "svg"
    JSON = "json"


class GeometryConfig(BaseModel):
    """Tolerances used by the clipping kernel.

    The defaults match the kernel's own defaults; coordinates are expected
    to be in the same range as screen or drawing units.
    """

    point_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance under which two points are considered equal",
    )
    parallel_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Determinant magnitude under which two segments are parallel",
    )
    overlap_epsilon: float = Field(
        default=1e-9,
        ge=0.0,
        description="Shared area above which two polygons overlap",
    )


class OutputConfig(BaseModel):
    """Configuration for written output."""

    format: OutputFormat = Field(
        default=OutputFormat.SVG,
        description="Output file format",
    )
    precision: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Decimal places for coordinates",
    )
    margin: float = Field(
        default=10.0,
        ge=0.0,
        description="Space around the drawing in SVG output",
    )
    stroke: str = Field(
        default="black",
        description="SVG stroke color",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="SVG stroke width",
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


class ShapeclipSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapeclipSettings:
    """Get default application settings."""
    return ShapeclipSettings()
