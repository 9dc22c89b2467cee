"""Tests for the bounded history ledger and its persistence."""

import json

import pendulum
import pytest

from passforge.errors import PersistenceWriteFailed
from passforge.utils.HistoryEntry import HistoryEntry
from passforge.utils.history_store import HistoryStore
from passforge.utils.storage import KeyValueStore


def test_archive_builds_entry(history):
    entry = history.archive("Abc123!")

    assert entry.value == "Abc123!"
    assert entry.length == 7
    assert entry.flags.lower and entry.flags.upper and entry.flags.digit and entry.flags.symbol
    assert history.list() == (entry,)


def test_archive_empty_is_noop(history, kv):
    assert history.archive("") is None
    assert len(history) == 0
    assert kv.get("passwordHistory") is None


def test_fifty_one_archives_keep_newest_fifty(history):
    for i in range(51):
        history.archive(f"secret-{i}")

    entries = history.list()
    assert len(entries) == 50
    assert [e.value for e in entries] == [f"secret-{i}" for i in range(50, 0, -1)]


def test_entries_are_newest_first(history):
    for i in range(5):
        history.archive(f"pw{i}")
    created = [e.created for e in history.list()]
    assert created == sorted(created, reverse=True)


def test_ids_are_unique_under_rapid_archival(kv):
    frozen = pendulum.datetime(2025, 1, 1, tz="UTC")
    store = HistoryStore(kv, clock=lambda: frozen)
    for _ in range(50):
        store.archive("same")
    assert len({e.id for e in store.list()}) == 50


def test_remove(history):
    first = history.archive("one")
    second = history.archive("two")

    history.remove(first.id)

    assert history.list() == (second,)


def test_remove_unknown_id_leaves_ledger_unchanged(history, kv):
    history.archive("one")
    before = history.list()
    stored = kv.get("passwordHistory")

    history.remove("no-such-id")

    assert history.list() == before
    assert kv.get("passwordHistory") == stored


def test_clear_empties_ledger_and_slot(history, kv, tmp_path):
    history.archive("one")
    history.clear()

    assert history.list() == ()
    assert kv.get("passwordHistory") is None
    assert not (tmp_path / "passwordHistory.json").exists()


def test_ledger_survives_reload(history, kv):
    for value in ("one", "two", "three"):
        history.archive(value)

    reloaded = HistoryStore(kv)

    assert [e.value for e in reloaded.list()] == ["three", "two", "one"]
    assert [e.id for e in reloaded.list()] == [e.id for e in history.list()]


def test_persisted_document_shape(history, kv):
    entry = history.archive("aB1!")
    data = json.loads(kv.get("passwordHistory"))

    assert data == [{
        "id": entry.id,
        "password": "aB1!",
        "timestamp": entry.created_at,
        "length": 4,
        "hasLowercase": True,
        "hasUppercase": True,
        "hasNumbers": True,
        "hasSymbols": True,
    }]


def test_reload_sorts_out_of_order_records(kv):
    older = HistoryEntry.create("a", "older", "2024-01-01T00:00:00+00:00")
    newer = HistoryEntry.create("b", "newer", "2025-01-01T00:00:00+00:00")
    kv.set("passwordHistory", json.dumps([older.to_dict(), newer.to_dict()]))

    assert [e.value for e in HistoryStore(kv).list()] == ["newer", "older"]


def test_corrupt_slot_starts_empty(tmp_path):
    (tmp_path / "passwordHistory.json").write_text("{not json", encoding="utf-8")

    store = HistoryStore(KeyValueStore(tmp_path))

    assert store.list() == ()


def test_malformed_records_start_empty(kv):
    kv.set("passwordHistory", json.dumps([{"id": "x"}]))
    assert HistoryStore(kv).list() == ()

    kv.set("passwordHistory", json.dumps({"id": "x"}))
    assert HistoryStore(kv).list() == ()

    kv.set("passwordHistory", json.dumps([
        {"id": "x", "password": "p", "timestamp": "not a date"},
    ]))
    assert HistoryStore(kv).list() == ()


VALID = {"id": "a", "password": "keep-me", "timestamp": "2024-03-01T10:00:00+00:00"}


@pytest.mark.parametrize("record", [
    {"id": "x", "password": "p", "timestamp": "P1D"},
    {"id": "x", "password": "p", "timestamp": "2024-01-01/2024-02-01"},
    {"id": "x", "password": 123, "timestamp": "2024-03-01T10:00:00+00:00"},
    {"id": "x", "password": "", "timestamp": "2024-03-01T10:00:00+00:00"},
])
def test_bad_record_starts_empty(kv, record):
    kv.set("passwordHistory", json.dumps([record]))
    assert HistoryStore(kv).list() == ()


def test_duration_timestamp_beside_valid_record_starts_empty(kv):
    kv.set("passwordHistory", json.dumps([
        VALID,
        {"id": "b", "password": "p", "timestamp": "P1D"},
    ]))

    store = HistoryStore(kv)

    assert store.list() == ()
    assert len(store) == 0


@pytest.mark.parametrize("timestamp, error", [
    ("P1D", ValueError),
    (20240301, TypeError),
])
def test_from_dict_rejects_non_datetime_timestamp(timestamp, error):
    with pytest.raises(error):
        HistoryEntry.from_dict({**VALID, "timestamp": timestamp})


@pytest.mark.parametrize("password, error", [
    ("", ValueError),
    (123, TypeError),
    (None, TypeError),
])
def test_from_dict_rejects_bad_password(password, error):
    with pytest.raises(error):
        HistoryEntry.from_dict({**VALID, "password": password})


def test_from_dict_accepts_valid_record():
    entry = HistoryEntry.from_dict(VALID)
    assert entry.value == "keep-me"
    assert entry.length == 7
    assert entry.created == pendulum.datetime(2024, 3, 1, 10)


class FailingStore(KeyValueStore):
    def set(self, key, text):
        raise PersistenceWriteFailed("disk full")

    def remove(self, key):
        raise PersistenceWriteFailed("disk full")


def test_write_failures_are_swallowed(tmp_path):
    store = HistoryStore(FailingStore(tmp_path))

    entry = store.archive("still works")
    store.remove("missing")
    store.remove(entry.id)
    store.archive("again")
    store.clear()

    assert store.list() == ()


def test_entry_repr_hides_value(history):
    entry = history.archive("topsecret")
    assert "topsecret" not in repr(entry)
