"""Reading, writing and converting semicolon-separated tables."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

Table = dict[int, list[str]]
Header = dict[str, int]


def _rows(reader: TextIO, delimiter: str = ";") -> Iterator[list[str]]:
    for record in csv.reader(reader, delimiter=delimiter):
        if record:
            yield record


def get_head(header: Sequence[str]) -> Header:
    """Map each column name to its position; a repeated name keeps its last one."""
    return {name: pos for pos, name in enumerate(header)}


def load_csv(reader: TextIO) -> tuple[Table, Header]:
    """Read a ``;``-separated table whose first row names the columns.

    Returns the data rows keyed by their row number (starting at 1)
    and the column positions keyed by name. Blank lines are skipped.
    """
    header: list[str] = []
    data: Table = {}
    for row, record in enumerate(_rows(reader)):
        if row == 0:
            header = record
        else:
            data[row] = record
    return data, get_head(header)


def load_csv_from_string(text: str) -> tuple[Table, Header]:
    """Like :func:`load_csv`, reading from a string."""
    return load_csv(text.splitlines())  # type: ignore[arg-type]


def load_csv_from_file(path: str | os.PathLike[str]) -> tuple[Table, Header]:
    """Like :func:`load_csv`, reading from the file at ``path``."""
    with open(path, newline="", encoding="utf-8") as fh:
        return load_csv(fh)


def fixed_length_before(text: str, spacer: str, length: int) -> str:
    """Left-pad ``text`` with the first character of ``spacer`` to ``length``.

    Text longer than ``length`` is cut to its first ``length`` characters.
    """
    if not spacer:
        raise ValueError("spacer must not be empty")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    missing = length - len(text)
    if missing > 0:
        return spacer[0] * missing + text
    return text[:length]


def csv_to_markdown(path: str | os.PathLike[str]) -> str:
    """Render a ``;``-separated file as a right-aligned Markdown table."""
    with open(path, newline="", encoding="utf-8") as fh:
        rows = list(_rows(fh))

    widths: dict[int, int] = {}
    for record in rows:
        for column, cell in enumerate(record):
            widths[column] = max(widths.get(column, 0), len(cell))

    lines = []
    for number, record in enumerate(rows):
        lines.append(
            "|".join(
                fixed_length_before(cell, " ", widths[column])
                for column, cell in enumerate(record)
            )
        )
        if number == 0:
            lines.append("|".join("-" * widths[column] for column in range(len(record))))
    return "".join(line + "\n" for line in lines)


def write_csv(path: str | os.PathLike[str], rows: Iterable[Sequence[str]]) -> None:
    """Write ``rows`` as a comma-separated file with ``\\n`` line endings."""
    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerows(rows)