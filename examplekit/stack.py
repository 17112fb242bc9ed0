"""A last-in, first-out stack of strings."""

from __future__ import annotations


class Stack:
    """LIFO container; popping an empty stack yields an empty string."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, item: str) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> str:
        """Take the top item, or return ``""`` when the stack is empty."""
        return self._items.pop() if self._items else ""

    def __len__(self) -> int:
        return len(self._items)