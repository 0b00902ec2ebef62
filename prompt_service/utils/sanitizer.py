"""Identifier sanitization for prompt categories and names."""
import re

MAX_IDENTIFIER_LENGTH = 50

_INVALID_CHARS = re.compile(r"[^a-z0-9-]")


def sanitize_identifier(raw: str) -> str:
    """
    Normalize a user-supplied string into a safe path segment.

    Lower-cases the input, replaces every character outside ``[a-z0-9-]``
    with ``-`` and truncates to 50 characters. Never fails: empty or
    all-invalid input yields an empty or all-hyphen string.

    Example:
        >>> sanitize_identifier("My API Prompt!")
        'my-api-prompt-'
    """
    return _INVALID_CHARS.sub("-", raw.lower())[:MAX_IDENTIFIER_LENGTH]

