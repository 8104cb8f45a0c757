"""Parsing of ``Source->Target`` transformation keys."""

from __future__ import annotations

from assetflow.constants.transform import KEY_DELIMITER
from assetflow.exceptions import InvalidKeyFormatError


def split_key(key: object) -> tuple[str, str]:
    """Split a transformation key into lower-cased ``(source, target)`` tokens.

    Raises InvalidKeyFormatError unless the key holds exactly one delimiter
    with non-empty text on both sides.
    """
    if not isinstance(key, str):
        raise InvalidKeyFormatError(key, "key must be a string")
    if not key.strip():
        raise InvalidKeyFormatError(key, "key is empty")

    parts = key.split(KEY_DELIMITER)
    if len(parts) == 1:
        raise InvalidKeyFormatError(key, f"missing '{KEY_DELIMITER}' delimiter")
    if len(parts) > 2:
        raise InvalidKeyFormatError(key, f"'{KEY_DELIMITER}' appears more than once")

    source, target = (part.strip().lower() for part in parts)
    if not source:
        raise InvalidKeyFormatError(key, "source is empty")
    if not target:
        raise InvalidKeyFormatError(key, "target is empty")
    return source, target


def normalize_type(name: str) -> str:
    """Normalize an entity type name the same way key segments are normalized."""
    return name.strip().lower()
