"""ISBN-10 and ISBN-13 check-digit verification."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def verify_isbn(code: str) -> bool:
    """Verify a 10- or 13-character ISBN without separators."""
    if len(code) == 10:
        return verify_isbn10(code)
    if len(code) == 13:
        return verify_isbn13(code)
    return False


def verify_isbn10(code: str) -> bool:
    """Verify an ISBN-10; ``X`` stands for the value 10."""
    if len(code) != 10:
        return False
    checksum = 0
    for weight, ch in zip(range(10, 0, -1), code):
        if ch == "X":
            digit = 10
        elif _is_digit(ch):
            digit = int(ch)
        else:
            return False
        checksum += weight * digit
    return checksum % 11 == 0


def verify_isbn13(code: str) -> bool:
    """Verify an ISBN-13 using alternating weights 1 and 3."""
    if len(code) != 13:
        return False
    body, check = code[:-1], code[-1]
    if not all(_is_digit(ch) for ch in body):
        return False
    checksum = sum(int(ch) * (3 if pos % 2 else 1) for pos, ch in enumerate(body))
    expected = (10 - checksum % 10) % 10
    return _is_digit(check) and expected == int(check)


def main(argv: Sequence[str] | None = None) -> int:
    """Check the ISBN given as the first argument and print the verdict."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: isbn ISBN", file=sys.stderr)
        return 2
    raw = args[0]
    valid = verify_isbn(raw.replace("-", ""))
    print(f"ISBN verification of {raw}: {'true' if valid else 'false'}")
    return 0