"""Fixed characters of the masking grammar.

The delimiter may be chosen per name instance; the escape character and the
canonical (machine-readable) delimiter are fixed for the whole package.
"""

# Delimiter used when none is given and always used for the canonical form.
DEFAULT_DELIMITER = "."

# The single escape character. Never configurable.
ESCAPE_CHARACTER = "\\"
