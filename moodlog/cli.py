"""Command-line interface to the mood diary."""

import argparse
import sys
from pathlib import Path

from .database import EntryStore
from .dates import format_date
from .notification import Notification, NotificationError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moodlog", description="Keep a diary of moods.")
    parser.add_argument("--db", type=Path, default=None, help="path of the diary database")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="record a new entry")
    add.add_argument("emoji")
    add.add_argument("note", nargs="?", default="")

    edit = commands.add_parser("edit", help="change an entry")
    edit.add_argument("entry_id", type=int)
    edit.add_argument("emoji")
    edit.add_argument("note", nargs="?", default="")

    delete = commands.add_parser("delete", help="remove an entry")
    delete.add_argument("entry_id", type=int)

    show = commands.add_parser("show", help="print one entry")
    show.add_argument("entry_id", type=int)

    commands.add_parser("list", help="print all entries, newest first")

    notify = commands.add_parser("notify", help="show a desktop notification")
    notify.add_argument("title")
    notify.add_argument("message", nargs="?", default="")
    notify.add_argument("--app-name", default="MoodTracker")
    notify.add_argument("--icon", default="")
    notify.add_argument("--timeout", type=int, default=3000)
    return parser


def _run_store_command(args) -> int:
    with EntryStore(args.db) as store:
        if args.command == "add":
            print(store.add_entry(args.emoji, args.note))
        elif args.command == "edit":
            store.edit_entry(args.entry_id, args.emoji, args.note)
        elif args.command == "delete":
            store.delete_entry(args.entry_id)
        elif args.command == "show":
            try:
                entry = store.entry_by_id(args.entry_id)
            except KeyError:
                print(f"moodlog: no entry with id {args.entry_id}", file=sys.stderr)
                return 1
            print(f"{entry.entry_id}\t{entry.emoji}\t{entry.note}")
        else:
            for entry in store.entries():
                label = format_date(entry.date).upper() if entry.date else ""
                print(f"{entry.entry_id}\t{entry.emoji}\t{label}\t{entry.note}")
    return 0


def main(argv=None) -> int:
    """Run the diary command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "notify":
        notification = Notification(
            app_name=args.app_name,
            icon=args.icon,
            title=args.title,
            message=args.message,
            timeout=args.timeout,
        )
        try:
            notification.send()
        except NotificationError as exc:
            print(f"moodlog: {exc}", file=sys.stderr)
            return 1
        return 0
    return _run_store_command(args)


if __name__ == "__main__":
    sys.exit(main())