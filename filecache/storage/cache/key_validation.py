"""Cache key and store name validation.

A valid key is safe both as a cache key and as a filename, which lets keys
map 1:1 onto item files without escaping.

Rules:
- length from 2 to 64 (128 for long-key stores)
- ASCII alphanumerics and - . [ ] _ only
- first character not a hyphen, which would read as a CLI option
"""

from typing import Any

from filecache.consts import (
    KEY_LENGTH_MAX,
    KEY_LENGTH_MIN,
    KEY_LONG_LENGTH_MAX,
    KEY_VALID_NON_ALPHANUM,
)


def validate_key(key: Any, max_length: int = KEY_LENGTH_MAX) -> bool:
    """Check that a key has legal length and characters.

    Args:
        key: Candidate key; anything but a str is invalid.
        max_length: Upper length bound, inclusive.

    Returns:
        True if the key is valid.
    """
    if not isinstance(key, str):
        return False
    if not KEY_LENGTH_MIN <= len(key) <= max_length:
        return False
    if key[0] == "-":
        return False
    return all((c.isascii() and c.isalnum()) or c in KEY_VALID_NON_ALPHANUM for c in key)


def validate_long_key(key: Any) -> bool:
    """Validate a key for a store allowing long keys."""
    return validate_key(key, KEY_LONG_LENGTH_MAX)


def validate_name(name: Any) -> bool:
    """Store and backup names follow the standard key rules.

    Names become directory names, so ".." is refused as well.
    """
    return validate_key(name, KEY_LENGTH_MAX) and name != ".."
