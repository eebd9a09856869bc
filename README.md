# moodlog

A small mood diary. Each entry is an emoji plus a short note, saved with the
time it was written in a local SQLite database. Listed entries come newest
first, each with a friendly relative date: `today, 5 March 14:30`,
`yesterday, 4 March 09:10`, the lower-case weekday name (`monday, 1 March 08:00`)
for the six days before that, and `5 March 2023` for anything older. When the
user's language is Russian the dates are written in Russian.

## Installation

```
pip install moodlog
```

## Command line

```
moodlog [--db PATH] COMMAND ...
```

By default the diary lives in `entries.db` in the user data directory for
`MoodTracker` (as chosen by `platformdirs`); `--db PATH` uses another file.
The directory is created if needed.

| Command | What it does |
| --- | --- |
| `moodlog add EMOJI [NOTE]` | Records a new entry stamped with the current time and prints its id. |
| `moodlog edit ID EMOJI [NOTE]` | Replaces the emoji and note of an entry. |
| `moodlog delete ID` | Removes an entry. |
| `moodlog show ID` | Prints `id`, emoji and note, tab-separated; exits with status 1 if there is no such entry. |
| `moodlog list` | Prints every entry, newest first, as `id`, emoji, upper-case date label and note, tab-separated. |
| `moodlog notify TITLE [MESSAGE]` | Shows a desktop notification. Options: `--app-name` (default `MoodTracker`), `--icon`, `--timeout` in milliseconds (default 3000). Exits with status 1 if it fails. |

## Library use

```python
from moodlog.database import EntryStore

with EntryStore("diary.db") as store:
    entry_id = store.add_entry("🙂", "Quiet morning, good coffee")
    store.edit_entry(entry_id, "😀", "Quiet morning, great coffee")
    print(store.entry_by_id(entry_id))
    for entry in store.entries():
        print(entry.entry_id, entry.emoji, entry.note, entry.date)
```

- `EntryStore(path=None)` opens (and if needed creates) the database;
  without a path it uses `default_database_path()`. It is a context manager
  and has `close()`.
- `add_entry(emoji, note)` returns the new id; `edit_entry`, `delete_entry`
  change or remove by id.
- `entries()` returns a list of `Entry` objects (`entry_id`, `emoji`, `note`,
  `date`), newest first.
- `entry_by_id(entry_id)` returns one `Entry` and raises `KeyError` if there
  is none.

### Dates

`moodlog.dates` provides:

- `format_date(date, today=None, language=None)`: Russian wording when
  `language` is `"ru"`, English otherwise. `today` defaults to the current
  date and `language` to `system_language()`.
- `format_russian(date, today=None)` and `format_international(date, today=None)`
  for a fixed language.
- `system_language()`: the two-letter language code taken from `LC_ALL`,
  `LC_MESSAGES` or `LANG` (falling back to the current locale), or `"en"`
  when none is set or the locale is `C`/`POSIX`.

### Notifications

`moodlog.notification.Notification` is a dataclass with `app_name`,
`replaces_id`, `icon`, `title`, `message`, `actions`, `hints` (string keys;
bool, int, float or string values) and `timeout` (default 3000 ms).

- `command(icon_path=None)` returns the `gdbus call` command line that calls
  `Notify` on the freedesktop notification service.
- `send()` runs that command and returns the id the service assigned, or
  `None` if none could be read. If `icon` names an existing file, it is first
  copied to a temporary file and passed as a `file://` URI. Failure to run
  `gdbus`, or a non-zero exit, raises `NotificationError`.

## What it does not do

moodlog has no graphical window: the diary is used from the command line or
from Python. Notifications need the `gdbus` tool and a desktop session with a
freedesktop notification service; there is no other way of delivering them.

## Running the tests

```
pip install "moodlog[test]"
pytest
```