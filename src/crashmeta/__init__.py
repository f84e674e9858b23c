"""crashmeta - Bounded, thread-safe user metadata for crash reports."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("crashmeta")
except PackageNotFoundError:
    __version__ = "0+local"
from crashmeta.config import AttributeLimits
from crashmeta.exceptions import (
    CrashMetaConfigError,
    CrashMetaError,
    InvalidAttributeKeyError,
    InvalidAttributeValueError,
    UnsupportedMutationError,
)
from crashmeta.models import UserMetadataSnapshot
from crashmeta.store import AttributeStore, CustomKeysView

__all__ = [
    "__version__",
    "AttributeLimits",
    "AttributeStore",
    "CrashMetaConfigError",
    "CrashMetaError",
    "CustomKeysView",
    "InvalidAttributeKeyError",
    "InvalidAttributeValueError",
    "UnsupportedMutationError",
    "UserMetadataSnapshot",
]
