"""Custom exception hierarchy for crashmeta."""

from __future__ import annotations


class CrashMetaError(Exception):
    """Base exception for all crashmeta errors."""


class CrashMetaConfigError(CrashMetaError):
    """Invalid store limits."""


class InvalidAttributeKeyError(CrashMetaError, ValueError):
    """Custom attribute key is missing or not a string."""


class InvalidAttributeValueError(CrashMetaError, ValueError):
    """Custom attribute value or user identifier is not a string."""


class UnsupportedMutationError(CrashMetaError, TypeError):
    """Write attempted through the read-only custom keys view.

    Attributes can only be changed through
    :meth:`crashmeta.store.AttributeStore.set_custom_key` and
    :meth:`crashmeta.store.AttributeStore.set_custom_keys`.
    """
