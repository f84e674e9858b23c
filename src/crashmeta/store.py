"""Thread-safe store for user metadata attached to crash reports.

Per-key writes rely on the single-operation atomicity of the built-in
``dict``; no store-wide lock is taken. The bulk capacity check in
:meth:`AttributeStore.set_custom_keys` is check-then-act, so racing writers
can push the map slightly past its limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, NoReturn

from crashmeta._constants import MAX_ATTRIBUTE_SIZE, MAX_ATTRIBUTES
from crashmeta._sanitize import sanitize_attribute, sanitize_key, sanitize_value
from crashmeta.config import AttributeLimits
from crashmeta.exceptions import UnsupportedMutationError
from crashmeta.models import UserMetadataSnapshot

_logger = logging.getLogger(__name__)


class CustomKeysView(Mapping[str, str]):
    """Read-only mapping backed by a store's live attributes.

    Keys added to the store after the view was handed out are visible
    through it.
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, str]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        # Iterate a copy of the keys so concurrent inserts cannot
        # change the dict size mid-iteration.
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise UnsupportedMutationError("custom keys view is read-only")

    __setitem__ = _read_only
    __delitem__ = _read_only
    __ior__ = _read_only
    update = _read_only
    pop = _read_only
    popitem = _read_only
    clear = _read_only
    setdefault = _read_only


class AttributeStore:
    """User id and custom attributes for one crash-reporting session.

    Parameters
    ----------
    limits : AttributeLimits or None
        Capacity and size limits. Defaults to :attr:`MAX_ATTRIBUTES`
        attributes of at most :attr:`MAX_ATTRIBUTE_SIZE` characters.
    """

    MAX_ATTRIBUTES = MAX_ATTRIBUTES
    MAX_ATTRIBUTE_SIZE = MAX_ATTRIBUTE_SIZE

    def __init__(self, *, limits: AttributeLimits | None = None) -> None:
        self._limits = limits or AttributeLimits()
        self._user_id: str | None = None
        self._attributes: dict[str, str] = {}
        self._view = CustomKeysView(self._attributes)

    @property
    def limits(self) -> AttributeLimits:
        return self._limits

    def get_user_id(self) -> str | None:
        return self._user_id

    def set_user_id(self, identifier: str | None) -> None:
        """Replace the user id; ``None`` clears it."""
        self._user_id = sanitize_attribute(identifier, max_size=self._limits.max_attribute_size)

    def get_custom_keys(self) -> CustomKeysView:
        """Return a live, read-only view of the custom attributes."""
        return self._view

    def set_custom_key(self, key: str, value: str | None) -> None:
        """Set a single attribute.

        A new key is silently dropped (with a debug log) once the store
        holds ``max_attributes`` entries; existing keys can always be
        overwritten. A ``None`` value is stored as an empty string.

        Raises :class:`~crashmeta.exceptions.InvalidAttributeKeyError`
        if *key* is ``None``.
        """
        size = self._limits.max_attribute_size
        key = sanitize_key(key, max_size=size)

        if len(self._attributes) >= self._limits.max_attributes and key not in self._attributes:
            self._log_capacity_exceeded()
            return

        self._attributes[key] = sanitize_value(value, max_size=size)

    def set_custom_keys(self, entries: Mapping[str, str | None]) -> None:
        """Set several attributes at once.

        Updates to keys already present are always applied. Keys not yet
        present are admitted as a batch: if adding all of them would exceed
        ``max_attributes``, none are added.

        Every key is validated before anything is written, so a ``None``
        key fails the whole call and leaves the store unchanged.
        """
        size = self._limits.max_attribute_size
        to_update: dict[str, str] = {}
        to_add: dict[str, str] = {}

        for raw_key, raw_value in entries.items():
            key = sanitize_key(raw_key, max_size=size)
            value = sanitize_value(raw_value, max_size=size)
            if key in self._attributes:
                to_update[key] = value
            else:
                to_add[key] = value

        self._attributes.update(to_update)

        if len(self._attributes) + len(to_add) > self._limits.max_attributes:
            self._log_capacity_exceeded()
            return
        self._attributes.update(to_add)

    def snapshot(self) -> UserMetadataSnapshot:
        """Copy the current metadata for embedding in a crash report."""
        return UserMetadataSnapshot(user_id=self._user_id, custom_keys=dict(self._attributes))

    def _log_capacity_exceeded(self) -> None:
        _logger.debug("Exceeded maximum number of custom attributes (%d)", self._limits.max_attributes)
