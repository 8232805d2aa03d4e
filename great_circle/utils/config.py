"""
Configuration management using Pydantic for validation.

This module provides type-safe loading and validation of route
configurations for the great-circle command-line runner.
"""
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import yaml

from great_circle.core.angles import to_format_spec
from great_circle.core.coordinate import Coordinate
from great_circle.core.tolerance import ToleranceDefaults
from great_circle.utils.exceptions import ConfigurationError
from great_circle.utils.logging_config import get_logger

logger = get_logger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class PointConfig(BaseModel):
    """A named point on the sphere."""
    name: str = Field(..., min_length=1, description="Display name of the point")
    latitude: float = Field(
        ..., ge=-90.0, le=90.0, allow_inf_nan=False, description="Latitude in degrees N"
    )
    longitude: float = Field(
        ..., allow_inf_nan=False, description="Longitude in degrees E (any finite value, normalized)"
    )

    def to_coordinate(self) -> Coordinate:
        """Build the Coordinate for this point."""
        return Coordinate(self.latitude, self.longitude)


class ToleranceParams(BaseModel):
    """Tolerances used when checking that a route lands on its destination."""
    relative: float = Field(ToleranceDefaults.RELATIVE, ge=0.0, description="Relative tolerance")
    absolute: float = Field(ToleranceDefaults.ABSOLUTE, ge=0.0, description="Absolute tolerance")


class OutputParams(BaseModel):
    """Output formatting."""
    fmt: str = Field("F2", description="Numeric format, Python spec ('.2f') or shorthand ('F2')")

    @field_validator('fmt')
    @classmethod
    def validate_fmt(cls, v: str) -> str:
        """Reject formats that cannot render a float."""
        to_format_spec(v)
        return v


class LoggingParams(BaseModel):
    """Logging options for the runner."""
    level: str = Field("WARNING", description="Log level")
    json_output: bool = Field(False, description="Emit JSON logs instead of console output")
    file: Optional[Path] = Field(None, description="Log file written alongside stdout")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v} (must be one of {', '.join(LOG_LEVELS)})")
        return level


class RouteConfig(BaseModel):
    """Complete configuration for a route computation."""
    origin: PointConfig
    destination: PointConfig
    tolerance: ToleranceParams = Field(default_factory=ToleranceParams)
    output: OutputParams = Field(default_factory=OutputParams)
    logging: LoggingParams = Field(default_factory=LoggingParams)


def load_config(config_path: Path) -> RouteConfig:
    """
    Load and validate a route configuration from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated RouteConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If the YAML is malformed or validation fails

    Example:
        >>> config = load_config(Path("config/routes/valparaiso_shanghai.yaml"))
        >>> print(config.origin.name, config.destination.name)
        Valparaiso Shanghai
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info("Loading configuration", config_file=str(config_path))

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        config = RouteConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid route config {config_path}: {e}") from e

    logger.info(
        "Configuration loaded",
        origin=config.origin.name,
        destination=config.destination.name,
    )
    return config


def get_default_config() -> RouteConfig:
    """
    Get the default route: Valparaiso to Shanghai, printed to one decimal.

    Matches config/routes/valparaiso_shanghai.yaml.

    Returns:
        Default RouteConfig
    """
    return RouteConfig(
        origin=PointConfig(name="Valparaiso", latitude=-33.0, longitude=-71.6),
        destination=PointConfig(name="Shanghai", latitude=31.4, longitude=121.8),
        output=OutputParams(fmt="F1"),
    )
