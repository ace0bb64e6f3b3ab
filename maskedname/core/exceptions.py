"""Exception hierarchy for maskedname.

All errors raised by the package derive from ``MaskedNameError`` and carry a
machine-readable error code, a context dictionary and recovery suggestions.
Each concrete error also subclasses the matching builtin (``IndexError``,
``ValueError``) so callers can catch it the usual Python way.
"""

from typing import Any, Dict, List, Optional


class MaskedNameError(Exception):
    """Base exception for all maskedname errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
        recovery_suggestions: List of suggested recovery actions
        component: Part of the package where the error originated
    """

    default_component = "core"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.component = component or self.default_component

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class IndexOutOfRangeError(MaskedNameError, IndexError):
    """Raised when a component index falls outside its valid interval.

    The name is never modified when this error is raised.
    """

    default_component = "components"

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        valid_range: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if index is not None:
            self.add_context("index", index)
        if valid_range:
            self.add_context("valid_range", valid_range)
        if operation:
            self.add_context("operation", operation)


class MaskingError(MaskedNameError, ValueError):
    """Raised under strict masking when a component is not properly masked."""

    default_component = "masking"

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        delimiter: Optional[str] = None,
        position: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if value is not None:
            self.add_context("value", value)
        if delimiter is not None:
            self.add_context("delimiter", delimiter)
        if position is not None:
            self.add_context("position", position)


class ConfigurationError(MaskedNameError, ValueError):
    """Raised when configuration is invalid or cannot be loaded."""

    default_component = "config"

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        field_name: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if config_file:
            self.add_context("config_file", config_file)
        if field_name:
            self.add_context("field_name", field_name)


# Convenience functions for creating common exception scenarios


def create_index_error(
    operation: str,
    index: int,
    size: int,
    inclusive_end: bool = False,
) -> IndexOutOfRangeError:
    """Create an index error for ``operation`` on a name with ``size`` components."""
    valid_range = f"[0, {size}]" if inclusive_end else f"[0, {size})"
    error = IndexOutOfRangeError(
        message=f"{operation}: index {index} out of range {valid_range}",
        index=index,
        valid_range=valid_range,
        operation=operation,
    )

    if size == 0 and not inclusive_end:
        error.add_recovery_suggestion("Name has no components; append one first")
    else:
        error.add_recovery_suggestion(f"Use an index within {valid_range}")
    return error


def create_masking_error(
    value: str,
    delimiter: str,
    position: int,
) -> MaskingError:
    """Create a masking error pointing at the first malformed position."""
    error = MaskingError(
        message=(
            f"Component {value!r} is not properly masked for delimiter "
            f"{delimiter!r} at position {position}"
        ),
        value=value,
        delimiter=delimiter,
        position=position,
    )

    error.add_recovery_suggestion("Mask raw content with maskedname.mask() before storing it")
    error.add_recovery_suggestion("Disable strict masking to store components verbatim")
    return error
