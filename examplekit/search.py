"""Searching in sorted and unsorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def binary_search(element: int, arr: Sequence[int]) -> bool:
    """Return True if ``element`` occurs in the ascending sequence ``arr``."""
    pos = bisect_left(arr, element)
    return pos < len(arr) and arr[pos] == element


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Index of the first item in ``arr`` not less than ``target``."""
    return bisect_left(arr, target)


def upper_bound(arr: Sequence[int], target: int) -> int:
    """Index of the first item in ``arr`` greater than ``target``."""
    return bisect_right(arr, target)


def _deep_equal(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    return a == b


def in_array(needle: Any, haystack: Any) -> tuple[bool, int]:
    """Look for ``needle`` in a list or tuple, matching type and value.

    Returns ``(found, index)``; ``index`` is -1 when nothing matches or
    when ``haystack`` is not a list or tuple.
    """
    if not isinstance(haystack, (list, tuple)):
        return False, -1
    for index, item in enumerate(haystack):
        if _deep_equal(needle, item):
            return True, index
    return False, -1