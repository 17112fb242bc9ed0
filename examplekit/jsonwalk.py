"""Walking decoded JSON trees and a compact JSON codec."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TextIO

Handler = Callable[[Any, Any, Any, int], None]

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def json_foreach(node: Any, handler: Handler) -> None:
    """Call ``handler(key, index, value, depth)`` for every nested value.

    Object members pass their key and ``None`` as index; array items pass
    ``None`` as key and their index. Children are visited right after
    their parent, one level deeper.
    """
    _walk(node, handler, 0)


def _walk(node: Any, handler: Handler, depth: int) -> None:
    if isinstance(node, dict):
        for key, value in node.items():
            handler(key, None, value, depth)
            _walk(value, handler, depth + 1)
    elif isinstance(node, list):
        for index, value in enumerate(node):
            handler(None, index, value, depth)
            _walk(value, handler, depth + 1)


class JsonCodec:
    """Compact JSON with sorted keys and HTML-safe escaping."""

    def encode(self, stream: TextIO, value: Any) -> None:
        """Write ``value`` as one line of JSON to ``stream``."""
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
        for char, escape in _ESCAPES.items():
            text = text.replace(char, escape)
        stream.write(text + "\n")

    def decode(self, stream: TextIO) -> Any:
        """Read the first JSON value from ``stream``; raises ValueError if there is none."""
        text = stream.read().lstrip()
        value, _ = json.JSONDecoder().raw_decode(text)
        return value


JSON = JsonCodec()