from __future__ import annotations

import pytest
from pydantic import ValidationError

from crashmeta.models import UserMetadataSnapshot
from crashmeta.store import AttributeStore


def test_snapshot_copies_current_metadata() -> None:
    store = AttributeStore()
    store.set_user_id(" user-1 ")
    store.set_custom_key("screen", "settings")

    snapshot = store.snapshot()
    assert snapshot.user_id == "user-1"
    assert snapshot.custom_keys == {"screen": "settings"}


def test_snapshot_is_not_affected_by_later_writes() -> None:
    store = AttributeStore()
    store.set_custom_key("a", "1")
    snapshot = store.snapshot()

    store.set_custom_key("a", "2")
    store.set_custom_key("b", "3")
    store.set_user_id("late")

    assert snapshot.custom_keys == {"a": "1"}
    assert snapshot.user_id is None


def test_snapshot_is_frozen() -> None:
    snapshot = AttributeStore().snapshot()
    with pytest.raises(ValidationError):
        snapshot.user_id = "x"  # type: ignore[misc]


def test_snapshot_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        UserMetadataSnapshot(user_id=None, custom_keys={}, extra_field=1)  # type: ignore[call-arg]


def test_snapshot_serializes_for_reports() -> None:
    store = AttributeStore()
    store.set_custom_keys({"a": "1"})
    assert store.snapshot().model_dump() == {"user_id": None, "custom_keys": {"a": "1"}}
