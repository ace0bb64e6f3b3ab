"""Core masking grammar and the MaskedName value type."""

from .config import NameConfig, get_config, reset_config, set_config
from .config_loader import NameConfigModel, load_config
from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER
from .exceptions import (
    ConfigurationError,
    IndexOutOfRangeError,
    MaskedNameError,
    MaskingError,
    create_index_error,
    create_masking_error,
)
from .masking import find_masking_error, is_well_masked, mask, split_masked, unmask
from .name import MaskedName

__all__ = [
    # Constants
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    # Masking grammar
    "mask",
    "unmask",
    "split_masked",
    "find_masking_error",
    "is_well_masked",
    # Name
    "MaskedName",
    # Configuration
    "NameConfig",
    "NameConfigModel",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # Exceptions
    "MaskedNameError",
    "IndexOutOfRangeError",
    "MaskingError",
    "ConfigurationError",
    "create_index_error",
    "create_masking_error",
]
