"""Runtime configuration from environment variables.

This module provides centralized configuration for maskedname: whether
component inputs are validated against the masking grammar, and how the
package logs. Values come from environment variables with tolerant parsing;
invalid values log a warning and fall back to defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"text", "json"}


@dataclass
class NameConfig:
    """Package configuration.

    Attributes:
        strict_masking: Validate components passed to constructors and
            mutators, raising MaskingError for malformed input. Off by
            default, in which case components are stored verbatim.
        log_level: Level for the ``maskedname`` logger
        log_format: Log output format (text|json)
    """

    strict_masking: bool = False
    log_level: str = "WARNING"
    log_format: str = "text"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_log_level()
        self._validate_log_format()

        logger.debug(
            f"NameConfig initialized: strict_masking={self.strict_masking}, "
            f"log_level={self.log_level}, log_format={self.log_format}"
        )

    def _validate_log_level(self) -> None:
        """Validate and normalize log_level."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            logger.warning(
                f"Invalid log_level '{self.log_level}', using 'WARNING'. "
                f"Valid: {sorted(VALID_LOG_LEVELS)}"
            )
            self.log_level = "WARNING"

    def _validate_log_format(self) -> None:
        """Validate and normalize log_format."""
        self.log_format = str(self.log_format).lower()
        if self.log_format not in VALID_LOG_FORMATS:
            logger.warning(
                f"Invalid log_format '{self.log_format}', using 'text'. "
                f"Valid: {sorted(VALID_LOG_FORMATS)}"
            )
            self.log_format = "text"

    @classmethod
    def from_environment(cls) -> "NameConfig":
        """Load configuration from environment variables.

        Environment Variables:
            MASKEDNAME_STRICT_MASKING: Validate component masking (true|false)
            MASKEDNAME_LOG_LEVEL: Logging level name
            MASKEDNAME_LOG_FORMAT: Log format (text|json)

        Returns:
            NameConfig instance with values from environment or defaults
        """
        config = cls(
            strict_masking=cls._get_env_bool("MASKEDNAME_STRICT_MASKING", False),
            log_level=cls._get_env_string("MASKEDNAME_LOG_LEVEL", "WARNING"),
            log_format=cls._get_env_string("MASKEDNAME_LOG_FORMAT", "text"),
        )
        logger.info(f"Loaded configuration from environment: {config}")
        return config

    @staticmethod
    def _get_env_string(key: str, default: str) -> str:
        """Get string value from environment with default fallback."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip()

    @staticmethod
    def _get_env_bool(key: str, default: bool) -> bool:
        """Get boolean value from environment with default fallback.

        Only 'true' and 'false' (case insensitive) are recognized; anything
        else yields the provided default.
        """
        value = os.getenv(key)
        if value is None:
            return default

        cleaned_value = value.strip().lower()
        if cleaned_value == "true":
            return True
        elif cleaned_value == "false":
            return False
        else:
            logger.warning(f"Environment variable {key}={value} is not a boolean, using {default}")
            return default

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "strict_masking": self.strict_masking,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }


# Global configuration instance, loaded lazily to support testing
_config: Optional[NameConfig] = None


def get_config() -> NameConfig:
    """Get the global configuration, creating it from the environment if needed."""
    global _config
    if _config is None:
        _config = NameConfig.from_environment()
    return _config


def set_config(config: NameConfig) -> None:
    """Replace the global configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration for testing purposes."""
    global _config
    _config = None
