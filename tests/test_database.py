import sqlite3
from datetime import datetime

import pytest

from moodlog.database import Entry, EntryStore, default_database_path


@pytest.fixture
def store(tmp_path):
    with EntryStore(tmp_path / "entries.db") as opened:
        yield opened


def test_add_and_fetch_round_trip(store):
    entry_id = store.add_entry("🙂", "walked the dog")
    entry = store.entry_by_id(entry_id)
    assert entry.entry_id == entry_id
    assert entry.emoji == "🙂"
    assert entry.note == "walked the dog"
    assert isinstance(entry.date, datetime)


def test_added_entry_is_stamped_now(store):
    before = datetime.now()
    entry_id = store.add_entry("😐", "")
    after = datetime.now()
    stamp = store.entry_by_id(entry_id).date
    assert before.replace(microsecond=0) <= stamp <= after


def test_ids_increase(store):
    first = store.add_entry("a", "one")
    second = store.add_entry("b", "two")
    assert second > first


def test_edit_entry(store):
    entry_id = store.add_entry("🙂", "fine")
    store.edit_entry(entry_id, "😢", "not fine")
    entry = store.entry_by_id(entry_id)
    assert (entry.emoji, entry.note) == ("😢", "not fine")


def test_delete_entry(store):
    entry_id = store.add_entry("🙂", "fine")
    store.delete_entry(entry_id)
    with pytest.raises(KeyError):
        store.entry_by_id(entry_id)
    assert store.entries() == []


def test_missing_entry_raises(store):
    with pytest.raises(KeyError):
        store.entry_by_id(12345)


def test_entries_newest_first(store):
    connection = sqlite3.connect(store.path)
    stamps = ["2024-01-01T10:00:00.000", "2024-03-01T10:00:00.000", "2023-12-31T10:00:00.000"]
    ids = []
    with connection:
        for index, stamp in enumerate(stamps):
            cursor = connection.execute(
                "INSERT INTO entries (emoji, note, date) VALUES (?, ?, ?)",
                ("x", f"note {index}", stamp),
            )
            ids.append(cursor.lastrowid)
    connection.close()

    listed = store.entries()
    assert [entry.entry_id for entry in listed] == [ids[1], ids[0], ids[2]]
    assert listed[0].date == datetime.fromisoformat(stamps[1])
    dates = [entry.date for entry in listed]
    assert dates == sorted(dates, reverse=True)


def test_entries_contains_all_added(store):
    ids = {store.add_entry("🙂", str(n)) for n in range(5)}
    assert {entry.entry_id for entry in store.entries()} == ids


def test_null_columns_become_empty_strings(store):
    connection = sqlite3.connect(store.path)
    with connection:
        row_id = connection.execute("INSERT INTO entries (emoji, note) VALUES (NULL, NULL)").lastrowid
    connection.close()
    entry = store.entry_by_id(row_id)
    assert entry == Entry(row_id, "", "", entry.date)
    assert isinstance(entry.date, datetime)


def test_persists_across_reopen(tmp_path):
    path = tmp_path / "nested" / "diary.db"
    with EntryStore(path) as first:
        entry_id = first.add_entry("🙂", "kept")
    assert path.exists()
    with EntryStore(path) as second:
        assert second.entry_by_id(entry_id).note == "kept"


def test_closed_store_rejects_use(tmp_path):
    with EntryStore(tmp_path / "entries.db") as opened:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        opened.entries()


def test_default_path_name():
    assert default_database_path().name == "entries.db"