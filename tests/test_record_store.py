from __future__ import annotations

import threading

import pytest

from job_portal.errors import OperationFailedError
from job_portal.services.record_store import RecordStore


def test_first_id_is_one_and_ids_are_max_plus_one() -> None:
    store = RecordStore("profile")
    first = store.create({"name": "A"})
    second = store.create({"name": "B"})
    assert first["id"] == 1
    assert second["id"] == 2
    assert store.get(2) == {"id": 2, "name": "B"}


def test_id_after_deletions_follows_current_max() -> None:
    store = RecordStore("profile")
    for name in ("A", "B", "C"):
        store.create({"name": name})

    assert store.delete(1) is True
    assert store.create({"name": "D"})["id"] == 4

    # Freeing the highest id makes it available again.
    assert store.delete(4) is True
    assert store.create({"name": "E"})["id"] == 4

    store.delete(2)
    store.delete(3)
    store.delete(4)
    assert len(store) == 0
    assert store.create({"name": "F"})["id"] == 1


def test_caller_supplied_id_is_ignored() -> None:
    store = RecordStore("job")
    record = store.create({"id": 99, "title": "Dev"})
    assert record["id"] == 1


def test_delete_unknown_id_leaves_collection_unchanged() -> None:
    store = RecordStore("job")
    store.create({"title": "Dev"})
    before = store.list()
    assert store.delete(42) is False
    assert store.list() == before


def test_delete_removes_exactly_one_record() -> None:
    store = RecordStore("job")
    for title in ("A", "B", "C"):
        store.create({"title": title})
    assert store.delete(2) is True
    assert [r["id"] for r in store.list()] == [1, 3]
    assert store.get(2) is None
    assert store.delete(2) is False


def test_returned_records_are_copies() -> None:
    store = RecordStore("profile")
    created = store.create({"skills": ["Go"]})
    created["skills"].append("Rust")
    listed = store.list()
    listed[0]["name"] = "mutated"
    assert store.get(1) == {"id": 1, "skills": ["Go"]}


def test_list_preserves_insertion_order() -> None:
    store = RecordStore("profile")
    for name in ("C", "A", "B"):
        store.create({"name": name})
    assert [r["name"] for r in store.list()] == ["C", "A", "B"]


def test_internal_fault_surfaces_as_operation_failed() -> None:
    class Exploding(dict):
        def items(self):
            raise RuntimeError("disk on fire")

    store = RecordStore("profile")
    with pytest.raises(OperationFailedError) as excinfo:
        store.create(Exploding())
    assert excinfo.value.code == "DATABASE_ERROR"
    assert "disk on fire" in excinfo.value.details
    assert len(store) == 0


def test_concurrent_creates_assign_unique_ids() -> None:
    store = RecordStore("profile")

    def worker() -> None:
        for _ in range(50):
            store.create({"name": "x"})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r["id"] for r in store.list()]
    assert len(ids) == 400
    assert sorted(ids) == list(range(1, 401))
