"""MaskedName: an ordered sequence of masked components with a delimiter.

A name is a sequence of string components separated by a delimiter
character. Special characters within a component are masked with the escape
character if they are to appear verbatim. There are only two special
characters: the delimiter, which can be chosen per name, and the escape
character, which cannot.

Examples:
    "oss.cs.fau.de" has four components with delimiter ".".
    "///" has four empty components with delimiter "/".
    "Oh\\.\\.\\." has one component with delimiter ".".
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from .config import get_config
from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER
from .exceptions import MaskingError, create_index_error, create_masking_error
from .masking import find_masking_error, mask, split_masked, unmask

logger = logging.getLogger(__name__)


class MaskedName:
    """A structured name whose components are stored in masked form.

    Components passed to the constructor and to the mutators are expected to
    be properly masked for this name's delimiter already; they are stored
    verbatim. With strict masking enabled (per instance or through
    ``NameConfig.strict_masking``) malformed components are rejected with
    ``MaskingError`` instead.

    Attributes:
        delimiter: Separator character used to interpret stored components
    """

    def __init__(
        self,
        components: Iterable[str] = (),
        delimiter: Optional[str] = None,
        strict: Optional[bool] = None,
    ):
        """Create a name from already-masked components.

        Args:
            components: Masked components; copied, never aliased
            delimiter: Delimiter character, DEFAULT_DELIMITER if omitted
            strict: Validate masking of components; None uses the global config

        Raises:
            MaskingError: In strict mode, if the delimiter or a component is malformed
        """
        self._delimiter = DEFAULT_DELIMITER if delimiter is None else delimiter
        self._strict = get_config().strict_masking if strict is None else strict
        self._components: list[str] = list(components)

        if self._strict:
            self._check_delimiter()
            for component in self._components:
                self._check_masked(component)

        logger.debug(
            f"Created name with {len(self._components)} components, "
            f"delimiter={self._delimiter!r}, strict={self._strict}"
        )

    @classmethod
    def from_raw_components(
        cls,
        raw_components: Iterable[str],
        delimiter: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "MaskedName":
        """Create a name from unmasked components, masking each one."""
        target = DEFAULT_DELIMITER if delimiter is None else delimiter
        return cls([mask(raw, target) for raw in raw_components], target, strict)

    @classmethod
    def from_canonical_string(
        cls,
        text: str,
        delimiter: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> "MaskedName":
        """Parse the canonical form produced by ``to_canonical_string``.

        The components are re-masked for ``delimiter``. The empty string
        parses to a name with one empty component.
        """
        raw_components = [
            unmask(part, DEFAULT_DELIMITER) for part in split_masked(text)
        ]
        return cls.from_raw_components(raw_components, delimiter, strict)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def strict(self) -> bool:
        return self._strict

    def to_display_string(self, delimiter: Optional[str] = None) -> str:
        """Return a human-readable representation of this name.

        Components are unmasked and joined with ``delimiter`` (this name's own
        delimiter by default) without any re-escaping, so the result is not
        necessarily parseable back into the same components.
        """
        target = self._delimiter if delimiter is None else delimiter
        return target.join(self._raw_components())

    def to_canonical_string(self) -> str:
        """Return the machine-readable representation of this name.

        Components are unmasked relative to this name's delimiter, re-masked
        for DEFAULT_DELIMITER and ESCAPE_CHARACTER, and joined with
        DEFAULT_DELIMITER. The result always parses back into the same raw
        components.
        """
        return DEFAULT_DELIMITER.join(
            mask(raw, DEFAULT_DELIMITER, ESCAPE_CHARACTER)
            for raw in self._raw_components()
        )

    def get_component(self, index: int) -> str:
        """Return the masked component at ``index``."""
        self._check_index("get_component", index)
        return self._components[index]

    def get_raw_component(self, index: int) -> str:
        """Return the unmasked content of the component at ``index``."""
        self._check_index("get_raw_component", index)
        return unmask(self._components[index], self._delimiter)

    def set_component(self, index: int, component: str) -> None:
        """Replace the component at ``index`` with an already-masked value."""
        self._check_index("set_component", index)
        self._check_masked(component)
        self._components[index] = component
        logger.debug(f"Set component {index} to {component!r}")

    def get_no_components(self) -> int:
        """Return the number of components."""
        return len(self._components)

    def insert(self, index: int, component: str) -> None:
        """Insert an already-masked component before ``index``.

        ``index`` may equal the number of components, which appends.
        """
        self._check_index("insert", index, inclusive_end=True)
        self._check_masked(component)
        self._components.insert(index, component)
        logger.debug(f"Inserted {component!r} at {index}")

    def append(self, component: str) -> None:
        """Append an already-masked component."""
        self.insert(len(self._components), component)

    def remove(self, index: int) -> None:
        """Remove the component at ``index``."""
        self._check_index("remove", index)
        removed = self._components.pop(index)
        logger.debug(f"Removed component {index} ({removed!r})")

    def to_dict(self) -> dict[str, Any]:
        """Convert name to a dictionary for serialization and logging."""
        return {
            "delimiter": self._delimiter,
            "components": list(self._components),
            "strict": self._strict,
            "canonical": self.to_canonical_string(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MaskedName":
        """Create a name from a dictionary produced by ``to_dict``."""
        return cls(data.get("components", []), data.get("delimiter"), data.get("strict"))

    def _raw_components(self) -> list[str]:
        return [unmask(c, self._delimiter) for c in self._components]

    def _check_index(self, operation: str, index: int, inclusive_end: bool = False) -> None:
        size = len(self._components)
        upper = size if inclusive_end else size - 1
        if not 0 <= index <= upper:
            raise create_index_error(operation, index, size, inclusive_end)

    def _check_masked(self, component: str) -> None:
        if not self._strict:
            return
        position = find_masking_error(component, self._delimiter)
        if position is not None:
            raise create_masking_error(component, self._delimiter, position)

    def _check_delimiter(self) -> None:
        if len(self._delimiter) != 1 or self._delimiter == ESCAPE_CHARACTER:
            error = MaskingError(
                f"Delimiter must be a single character other than {ESCAPE_CHARACTER!r}, "
                f"got {self._delimiter!r}",
                delimiter=self._delimiter,
            )
            error.add_recovery_suggestion(f"Use {DEFAULT_DELIMITER!r} or another single character")
            raise error

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._components))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaskedName):
            return NotImplemented
        return (
            self._delimiter == other._delimiter
            and self._components == other._components
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"MaskedName({self._components!r}, delimiter={self._delimiter!r})"
