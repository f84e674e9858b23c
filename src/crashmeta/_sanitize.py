"""Helpers for normalizing attribute strings before storage.

Every key, value and user identifier goes through these helpers so that
stored strings are trimmed and never longer than the size limit.
"""

from __future__ import annotations

from typing import Any

from crashmeta._constants import MAX_ATTRIBUTE_SIZE
from crashmeta.exceptions import InvalidAttributeKeyError, InvalidAttributeValueError


def _trim(value: str, max_size: int) -> str:
    value = value.strip()
    if len(value) > max_size:
        return value[:max_size]
    return value


def sanitize_attribute(value: Any, *, max_size: int = MAX_ATTRIBUTE_SIZE) -> str | None:
    """Trim *value* and truncate it to *max_size* characters.

    ``None`` is returned unchanged.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidAttributeValueError(f"attribute must be a string, got {type(value).__name__}")
    return _trim(value, max_size)


def sanitize_key(key: Any, *, max_size: int = MAX_ATTRIBUTE_SIZE) -> str:
    """Check that *key* is present, then sanitize it."""
    if key is None:
        raise InvalidAttributeKeyError("Custom attribute key must not be None.")
    if not isinstance(key, str):
        raise InvalidAttributeKeyError(f"Custom attribute key must be a string, got {type(key).__name__}")
    return _trim(key, max_size)


def sanitize_value(value: Any, *, max_size: int = MAX_ATTRIBUTE_SIZE) -> str:
    """Sanitize an attribute value; ``None`` is stored as an empty string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidAttributeValueError(f"attribute value must be a string, got {type(value).__name__}")
    return _trim(value, max_size)
