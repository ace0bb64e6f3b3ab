"""Masking grammar for delimiter-separated name components.

A component is *raw* when it holds its logical content and *masked* when every
literal delimiter or escape character in it is prefixed by the escape
character. ``mask`` and ``unmask`` convert between the two forms relative to a
given (delimiter, escape) pair. Both are total: they never raise for string
input.

Examples (delimiter ``.``, escape ``\\``):

    >>> mask("Oh...", ".")
    'Oh\\\\.\\\\.\\\\.'
    >>> unmask("Oh\\\\.\\\\.\\\\.", ".")
    'Oh...'
    >>> split_masked("a\\\\.b.c")
    ['a\\\\.b', 'c']
"""

import logging
from typing import Optional

from .constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER

logger = logging.getLogger(__name__)


def mask(raw: str, delimiter: str, escape_char: str = ESCAPE_CHARACTER) -> str:
    """Escape every delimiter and escape character in a raw component.

    Args:
        raw: Unescaped component content
        delimiter: Delimiter character the result must be safe against
        escape_char: Escape character to prefix special characters with

    Returns:
        Masked component; ``unmask(result, delimiter, escape_char) == raw``
    """
    parts: list[str] = []
    for ch in raw:
        if ch == escape_char or ch == delimiter:
            parts.append(escape_char)
        parts.append(ch)
    return "".join(parts)


def unmask(masked: str, delimiter: str, escape_char: str = ESCAPE_CHARACTER) -> str:
    """Recover the raw content of a masked component.

    An escape character followed by the escape character or the delimiter
    yields that following character. Any other escape character (before an
    ordinary character, or at the very end) is kept literally and the next
    character is processed on its own.

    Args:
        masked: Component in masked form
        delimiter: Delimiter character the component was masked against
        escape_char: Escape character used for masking

    Returns:
        Raw component content
    """
    parts: list[str] = []
    i = 0
    length = len(masked)
    while i < length:
        ch = masked[i]
        if ch == escape_char and i + 1 < length:
            following = masked[i + 1]
            if following == escape_char or following == delimiter:
                parts.append(following)
                i += 2
                continue
        # Lone escape or ordinary character
        parts.append(ch)
        i += 1
    return "".join(parts)


def split_masked(
    text: str,
    delimiter: str = DEFAULT_DELIMITER,
    escape_char: str = ESCAPE_CHARACTER,
) -> list[str]:
    """Split a masked name string on its unescaped delimiters.

    Components are returned still masked. The empty string yields a single
    empty component, mirroring ``"".join([""])``.

    Args:
        text: Name string whose components are masked against ``delimiter``
        delimiter: Component separator
        escape_char: Escape character

    Returns:
        List of masked components, at least one element long
    """
    components: list[str] = []
    current: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == escape_char and i + 1 < length:
            current.append(ch)
            current.append(text[i + 1])
            i += 2
            continue
        if ch == delimiter:
            components.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    components.append("".join(current))

    logger.debug(f"Split {text!r} into {len(components)} components on {delimiter!r}")
    return components


def find_masking_error(
    masked: str,
    delimiter: str,
    escape_char: str = ESCAPE_CHARACTER,
) -> Optional[int]:
    """Locate the first position where a component is not properly masked.

    A component is well-masked when every delimiter and escape character in it
    is part of an escape pair. Reported malformations are an unescaped
    delimiter, an escape before an ordinary character and a trailing lone
    escape.

    Returns:
        Index of the offending character, or None if the component is well-masked
    """
    i = 0
    length = len(masked)
    while i < length:
        ch = masked[i]
        if ch == escape_char:
            if i + 1 < length and masked[i + 1] in (escape_char, delimiter):
                i += 2
                continue
            return i
        if ch == delimiter:
            return i
        i += 1
    return None


def is_well_masked(
    masked: str,
    delimiter: str,
    escape_char: str = ESCAPE_CHARACTER,
) -> bool:
    """Return True if ``masked`` contains no masking errors."""
    return find_masking_error(masked, delimiter, escape_char) is None
