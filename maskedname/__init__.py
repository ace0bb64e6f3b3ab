"""maskedname: delimiter-separated names with an escape grammar.

A MaskedName stores its components in masked form relative to its own
delimiter and renders them either for display or in a canonical,
always-parseable form that uses "." as delimiter and "\\" as escape.
"""

__version__ = "0.1.0"

from .core import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    ConfigurationError,
    IndexOutOfRangeError,
    MaskedName,
    MaskedNameError,
    MaskingError,
    NameConfig,
    find_masking_error,
    get_config,
    is_well_masked,
    load_config,
    mask,
    reset_config,
    set_config,
    split_masked,
    unmask,
)
from .observability import configure_logging

__all__ = [
    "__version__",
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    "MaskedName",
    "mask",
    "unmask",
    "split_masked",
    "find_masking_error",
    "is_well_masked",
    # Configuration
    "NameConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "configure_logging",
    # Exceptions
    "MaskedNameError",
    "IndexOutOfRangeError",
    "MaskingError",
    "ConfigurationError",
]
