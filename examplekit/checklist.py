"""Printing a checklist to any writable text stream."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO


def print_check_list(writer: TextIO, items: Iterable[str]) -> None:
    """Write each item on its own line to ``writer``."""
    for item in items:
        print(item, file=writer)