"""Persistent storage of mood entries in SQLite."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from platformdirs import user_data_dir

_APP_NAME = "MoodTracker"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    emoji TEXT,
    note TEXT,
    date DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""


@dataclass(frozen=True)
class Entry:
    """One diary entry."""

    entry_id: int
    emoji: str
    note: str
    date: datetime | None = None


def default_database_path() -> Path:
    """Return the location of the diary in the user's data directory."""
    return Path(user_data_dir(_APP_NAME, appauthor=False)) / "entries.db"


def _parse_date(value) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


def _text(value) -> str:
    return "" if value is None else str(value)


class EntryStore:
    """A diary of mood entries kept in an SQLite file."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_database_path()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = sqlite3.connect(self.path)
        with self._connection:
            self._connection.execute(_SCHEMA)

    def add_entry(self, emoji: str, note: str) -> int:
        """Record a new entry stamped with the current time; return its id."""
        stamp = datetime.now().isoformat(timespec="milliseconds")
        with self._connection:
            cursor = self._connection.execute(
                "INSERT INTO entries (emoji, note, date) VALUES (?, ?, ?)",
                (emoji, note, stamp),
            )
        return cursor.lastrowid

    def edit_entry(self, entry_id: int, emoji: str, note: str) -> None:
        """Replace the emoji and note of an entry."""
        with self._connection:
            self._connection.execute(
                "UPDATE entries SET emoji = ?, note = ? WHERE id = ?",
                (emoji, note, entry_id),
            )

    def delete_entry(self, entry_id: int) -> None:
        """Remove an entry."""
        with self._connection:
            self._connection.execute("DELETE FROM entries WHERE id = ?", (entry_id,))

    def entries(self) -> list[Entry]:
        """Return all entries, newest first."""
        rows = self._connection.execute(
            "SELECT id, emoji, note, date FROM entries ORDER BY date DESC"
        )
        return [
            Entry(int(row_id), _text(emoji), _text(note), _parse_date(stamp))
            for row_id, emoji, note, stamp in rows
        ]

    def entry_by_id(self, entry_id: int) -> Entry:
        """Return the entry with ``entry_id``; raise KeyError if there is none."""
        row = self._connection.execute(
            "SELECT id, emoji, note, date FROM entries WHERE id = ?", (entry_id,)
        ).fetchone()
        if row is None:
            raise KeyError(entry_id)
        row_id, emoji, note, stamp = row
        return Entry(int(row_id), _text(emoji), _text(note), _parse_date(stamp))

    def close(self) -> None:
        """Close the underlying database connection."""
        self._connection.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()