from __future__ import annotations

import threading

from crashmeta.store import AttributeStore


def _run_threads(targets: list[threading.Thread]) -> None:
    for thread in targets:
        thread.start()
    for thread in targets:
        thread.join(timeout=10)


def test_concurrent_distinct_keys_are_not_lost() -> None:
    store = AttributeStore()
    barrier = threading.Barrier(8)

    def writer(worker: int) -> None:
        barrier.wait()
        for i in range(8):
            store.set_custom_key(f"w{worker}-{i}", str(i))

    _run_threads([threading.Thread(target=writer, args=(n,)) for n in range(8)])

    keys = store.get_custom_keys()
    assert len(keys) == 64
    assert keys["w7-7"] == "7"


def test_concurrent_writers_never_exceed_single_key_capacity_by_much() -> None:
    store = AttributeStore()
    barrier = threading.Barrier(4)

    def writer(worker: int) -> None:
        barrier.wait()
        for i in range(100):
            store.set_custom_key(f"w{worker}-{i}", "v")

    _run_threads([threading.Thread(target=writer, args=(n,)) for n in range(4)])

    # Check-then-act can overshoot by at most one per racing writer.
    assert 64 <= len(store.get_custom_keys()) <= 64 + 4


def test_view_iteration_tolerates_concurrent_inserts() -> None:
    store = AttributeStore()
    view = store.get_custom_keys()
    stop = threading.Event()
    errors: list[BaseException] = []

    def reader() -> None:
        try:
            while not stop.is_set():
                for key in view:
                    assert view[key] == "v"
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    reader_thread = threading.Thread(target=reader)
    reader_thread.start()
    try:
        for i in range(64):
            store.set_custom_key(f"k{i}", "v")
    finally:
        stop.set()
        reader_thread.join(timeout=10)

    assert errors == []
    assert len(view) == 64
