"""A small SQLite table of timestamped notes, with a command-line front end."""

from __future__ import annotations

import argparse
import datetime
import os
import sqlite3
import sys
import time
from collections.abc import Sequence
from types import TracebackType

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS "main"."test" (
    "id" INTEGER PRIMARY KEY AUTOINCREMENT,
    "text" TEXT,
    "time" INTEGER
)"""

Row = tuple[int, str, int]


class NoteStore:
    """Notes kept in the table ``test`` of an SQLite database."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._db = sqlite3.connect(os.fspath(path))
        with self._db:
            self._db.execute(_CREATE_TABLE)

    def insert(self, text: str, timestamp: int | None = None) -> int:
        """Add a note stamped with ``timestamp`` (default: now); return its id."""
        when = int(time.time()) if timestamp is None else int(timestamp)
        with self._db:
            cursor = self._db.execute(
                'INSERT INTO "main"."test" ("text", "time") VALUES (?, ?)', (text, when)
            )
        return int(cursor.lastrowid)

    def latest(self) -> Row | None:
        """The most recent note as ``(id, text, time)``, or ``None`` if empty."""
        row = self._db.execute(
            'SELECT id, text, time FROM "main"."test" ORDER BY time DESC, id DESC LIMIT 1'
        ).fetchone()
        return None if row is None else (row[0], row[1], row[2])

    def rows(self) -> list[Row]:
        """All notes, newest first."""
        return [
            (r[0], r[1], r[2])
            for r in self._db.execute(
                'SELECT id, text, time FROM "main"."test" ORDER BY time DESC, id DESC'
            )
        ]

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def __enter__(self) -> NoteStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _rfc1123z(timestamp: int) -> str:
    moment = datetime.datetime.fromtimestamp(timestamp).astimezone()
    return moment.strftime("%a, %d %b %Y %H:%M:%S %z")


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``select``, ``insert DATA`` or ``csv`` against the notes database."""
    parser = argparse.ArgumentParser(prog="notes")
    parser.add_argument("mode", nargs="?")
    parser.add_argument("data", nargs="?")
    parser.add_argument("--database", default="sqlite.sqlite")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    if args.mode is None:
        print("Error: no mode set", file=sys.stderr)
        return 1

    with NoteStore(args.database) as store:
        if args.mode == "select":
            row = store.latest()
            if row is None:
                print("Error: while getting row data: no rows", file=sys.stderr)
                return 1
            print("Last inserted data is: " + row[1])
            print("Inserted on " + _rfc1123z(row[2]))
        elif args.mode == "insert":
            if args.data is None:
                print("Error: no data provided", file=sys.stderr)
                return 1
            store.insert(args.data)
            print(args.data + " inserted")
        elif args.mode == "csv":
            print("Id,Text,Time")
            for row_id, text, stamp in store.rows():
                print(f"{row_id},{text},{stamp}")
    return 0