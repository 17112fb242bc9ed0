"""A server that delegates work to a replaceable API client."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class ApiClient(Protocol):
    """Anything that can double a number, possibly over the network."""

    def api_double(self, value: int) -> int:
        """Return twice ``value``."""


class MyApiClient:
    """The real client, doubling locally."""

    def api_double(self, value: int) -> int:
        return value * 2


@dataclass
class Server:
    client: ApiClient

    def function_to_test(self, value: int) -> int:
        """Ask the client to double ``value``; client errors propagate."""
        return self.client.api_double(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Double 2 with the real client and print the result."""
    del argv
    server = Server(MyApiClient())
    print(server.function_to_test(2))
    sys.stdout.flush()
    return 0