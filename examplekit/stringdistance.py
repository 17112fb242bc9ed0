"""Edit distances between byte strings."""

from __future__ import annotations


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def levenshtein_distance(a: str | bytes, b: str | bytes) -> int:
    """Levenshtein distance over the UTF-8 bytes of ``a`` and ``b``."""
    a, b = _as_bytes(a), _as_bytes(b)
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        current = [i + 1]
        for j, cb in enumerate(b):
            current.append(
                min(previous[j + 1] + 1, current[j] + 1, previous[j] + (ca != cb))
            )
        previous = current
    return previous[-1]


def damerau_levenshtein_distance(a: str | bytes, b: str | bytes) -> int:
    """Damerau-Levenshtein distance, counting adjacent swaps as one edit."""
    a, b = _as_bytes(a), _as_bytes(b)
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    row = list(range(len(b) + 1))
    following = 0
    for i, ca in enumerate(a):
        current = i + 1
        for j, cb in enumerate(b):
            swapped = i > 0 and j > 0 and a[i - 1] == cb and ca == b[j - 1]
            cost = 0 if ca == cb or swapped else 1
            following = min(row[j + 1] + 1, row[j] + cost, current + 1)
            row[j], current = current, following
        row[len(b)] = following
    return following