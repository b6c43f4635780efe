import sqlite3
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from site_pins.database_client import MarkerStore
from site_pins.models import NewMarker


def test_initialize_is_idempotent(store):
    store.initialize()
    store.initialize()
    assert store.list_all() == []


def test_insert_returns_outcome(store):
    first = store.insert(NewMarker(latitude=1.0, longitude=2.0, website="a", siteName="A"))
    second = store.insert(NewMarker(latitude=3.0, longitude=4.0, website="b", siteName="B"))
    assert first == {"changes": 1, "lastInsertRowid": 1}
    assert second == {"changes": 1, "lastInsertRowid": 2}


def test_list_all_returns_every_row_once(store):
    for i in range(5):
        store.insert(NewMarker(latitude=i, longitude=-i, website=f"https://{i}.example", siteName=str(i)))
    markers = store.list_all()
    assert sorted(m["siteName"] for m in markers) == ["0", "1", "2", "3", "4"]
    assert len({m["id"] for m in markers}) == 5


def test_is_anonymous_stored_as_int_returned_as_bool(store, db_path):
    store.insert(NewMarker(latitude=0, longitude=0, website="w", siteName="s", isAnonymous=True))
    store.insert(NewMarker(latitude=0, longitude=0, website="w", siteName="t"))

    conn = sqlite3.connect(db_path)
    try:
        raw = [r[0] for r in conn.execute("SELECT isAnonymous FROM markers ORDER BY id")]
    finally:
        conn.close()
    assert raw == [1, 0]

    flags = {m["siteName"]: m["isAnonymous"] for m in store.list_all()}
    assert flags == {"s": True, "t": False}


def test_optional_fields_stored_as_null(store):
    store.insert(NewMarker(latitude=5, longitude=6, website="w", siteName="s"))
    m = store.list_all()[0]
    for field in ("siteDescription", "ownerName", "ownerDescription", "ownerWebsite"):
        assert m[field] is None
    assert m["created_at"]


def test_not_null_constraint_propagates(store):
    with pytest.raises(sqlite3.IntegrityError):
        store.insert(NewMarker(latitude=1, longitude=2, website=None, siteName="s"))
    assert store.list_all() == []


def test_creates_missing_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "markers.db"
    store = MarkerStore(str(path))
    try:
        store.initialize()
        assert path.exists()
    finally:
        store.close()


def test_concurrent_inserts_keep_acknowledged_rows(store):
    good = [NewMarker(latitude=i, longitude=i, website=f"https://{i}.example", siteName=f"ok-{i}")
            for i in range(40)]
    bad = [NewMarker(latitude=i, longitude=i, website=None, siteName=f"bad-{i}") for i in range(40)]
    start = threading.Barrier(8)

    def insert(marker):
        try:
            return store.insert(marker)
        except sqlite3.IntegrityError:
            return None

    def worker(markers):
        start.wait()
        return [insert(m) for m in markers]

    # each thread alternates good and failing inserts
    batches = [[m for pair in zip(good[i::8], bad[i::8]) for m in pair] for i in range(8)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = [r for batch in pool.map(worker, batches) for r in batch]

    acknowledged = [r for r in results if r is not None]
    stored = store.list_all()
    assert all(r["changes"] == 1 for r in acknowledged)
    assert {r["lastInsertRowid"] for r in acknowledged} == {m["id"] for m in stored}
    assert len(acknowledged) == len(stored) == 40
    assert all(m["siteName"].startswith("ok-") for m in stored)
