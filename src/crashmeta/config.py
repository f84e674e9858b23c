"""Store configuration for crashmeta."""

from __future__ import annotations

import dataclasses

from crashmeta._constants import MAX_ATTRIBUTE_SIZE, MAX_ATTRIBUTES
from crashmeta.exceptions import CrashMetaConfigError


@dataclasses.dataclass(frozen=True)
class AttributeLimits:
    """Capacity and size limits applied by an attribute store.

    Parameters
    ----------
    max_attributes : int
        Maximum number of custom attributes. Writes that would add keys
        beyond this count are rejected with an advisory log line.
    max_attribute_size : int
        Maximum length of a stored key, value or user identifier.
        Longer strings are truncated after trimming.
    """

    max_attributes: int = MAX_ATTRIBUTES
    max_attribute_size: int = MAX_ATTRIBUTE_SIZE

    def __post_init__(self) -> None:
        if self.max_attributes < 1:
            raise CrashMetaConfigError(f"max_attributes must be >= 1, got {self.max_attributes}")
        if self.max_attribute_size < 1:
            raise CrashMetaConfigError(f"max_attribute_size must be >= 1, got {self.max_attribute_size}")
