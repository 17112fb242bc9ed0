"""Formatting values as text, ISO 8601 matching and summing numbers."""

from __future__ import annotations

import datetime
import math
import re
import sys
from decimal import Decimal
from typing import Any

_ISO8601 = re.compile(
    r"(?P<ISO8601>(?P<year>\d{4})(\-W((?P<week>\d{1,2})\-(?P<weekday>\d)?)"
    r"|\-(?P<month>\d{2})\-(?P<day>\d{2})(T(?P<hour>\d{2}):(?P<min>\d{2})"
    r"(:(?P<sec>\d{2})(\+\d{2}:\d{2}Z?)?)?)?|\-(?P<yearday>\d{1,3})))",
    re.ASCII,
)
_GROUP_NAMES = [name for name, _ in sorted(_ISO8601.groupindex.items(), key=lambda kv: kv[1])]

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def _decimal(value: int, digits: int) -> str:
    whole, fraction = divmod(value, 10**digits)
    if not fraction:
        return str(whole)
    return f"{whole}.{str(fraction).zfill(digits).rstrip('0')}"


def _format_duration(delta: datetime.timedelta) -> str:
    ns = (delta.days * 86400 + delta.seconds) * 10**9 + delta.microseconds * 1000
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u < 10**9:
        if u == 0:
            return "0s"
        if u < 10**3:
            return f"{sign}{u}ns"
        if u < 10**6:
            return f"{sign}{_decimal(u, 3)}\u00b5s"
        return f"{sign}{_decimal(u, 6)}ms"
    minutes_total, seconds = divmod(u, 60 * 10**9)
    text = _decimal(seconds, 9) + "s"
    if minutes_total:
        hours, minutes = divmod(minutes_total, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _format_time(moment: datetime.datetime) -> str:
    if moment.tzinfo is None or moment.utcoffset() is None:
        moment = moment.astimezone()
    base = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    offset = moment.utcoffset()
    if not offset:
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{base}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, x) < 0 else ""
    if x == 0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + int(exponent)
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{sign}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def to_string(value: Any) -> str:
    """Plain text form of ``value``.

    Booleans become ``true``/``false``, durations read like ``5m0s``,
    datetimes use RFC 3339, bytes are decoded as UTF-8.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.timedelta):
        return _format_duration(value)
    if isinstance(value, datetime.datetime):
        return _format_time(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if value is None:
        return "<nil>"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(to_string(item) for item in value) + "]"
    if isinstance(value, dict):
        items = list(value.items())
        try:
            items.sort(key=lambda kv: kv[0])
        except TypeError:
            pass
        return "map[" + " ".join(f"{to_string(k)}:{to_string(v)}" for k, v in items) + "]"
    return str(value)


def iso8601_matches(text: str) -> list[dict[str, str]]:
    """Every ISO 8601 date or time found in ``text``.

    Each match is a mapping from group name (``ISO8601``, ``year``, ``month``,
    ``day``, ``hour``, ``min``, ``sec``, ``week``, ``weekday``, ``yearday``)
    to its text; groups that took no part are left out.
    """
    results = []
    for match in _ISO8601.finditer(text):
        results.append({name: match.group(name) for name in _GROUP_NAMES if match.group(name)})
    return results


def sum_numbers(text: str) -> float:
    """Sum the whitespace-separated numbers in ``text``; bad entries are reported and skipped."""
    total = 0.0
    for field in text.split():
        if not _FLOAT.fullmatch(field):
            print(f'strconv.ParseFloat: parsing "{field}": invalid syntax', file=sys.stderr)
            continue
        total += float(field)
    return total