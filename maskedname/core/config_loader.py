"""YAML configuration file loading with schema validation.

A configuration file looks like::

    version: "1.0"
    strict_masking: true
    logging:
      level: DEBUG
      format: json

Every key is optional; missing keys take the ``NameConfig`` defaults.
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .config import VALID_LOG_FORMATS, VALID_LOG_LEVELS, NameConfig
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``logging`` section."""

    level: str = Field("WARNING", description="Logging level name")
    format: str = Field("text", description="Log output format")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: Any) -> Any:
        """Validate logging level name."""
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Valid levels: {sorted(VALID_LOG_LEVELS)}"
            )
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: Any) -> Any:
        """Validate log format."""
        fmt = str(v).lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(
                f"Invalid log format '{v}'. Valid formats: {sorted(VALID_LOG_FORMATS)}"
            )
        return fmt


class NameConfigModel(BaseModel):
    """Pydantic model for configuration file schema validation."""

    version: Optional[str] = Field("1.0", description="Config schema version")
    strict_masking: bool = Field(False, description="Validate component masking")
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        """Accept unquoted YAML versions such as ``version: 1.0``."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: Any) -> Any:
        """Validate version format."""
        if v is not None:
            version_pattern = r"^\d+\.\d+(\.\d+)?$"
            if not re.match(version_pattern, v):
                raise ValueError(
                    f"Version must follow format 'x.y' or 'x.y.z', got '{v}'"
                )
        return v

    def to_config(self) -> NameConfig:
        """Build the runtime configuration from the validated model."""
        return NameConfig(
            strict_masking=self.strict_masking,
            log_level=self.logging.level,
            log_format=self.logging.format,
        )


def load_config(path: Union[str, Path]) -> NameConfig:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        NameConfig built from the file contents

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the YAML is malformed or fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {e}", config_file=str(config_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}",
            config_file=str(config_path),
        )

    try:
        model = NameConfigModel(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Config validation failed for {config_path}: {e}",
            config_file=str(config_path),
            field_name=field_name or None,
        ) from e

    logger.info(f"Loaded configuration from {config_path}")
    return model.to_config()
