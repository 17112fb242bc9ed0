"""Approximating pi with infinite series and products."""

from __future__ import annotations

import argparse
import math
import signal
import sys
import threading
import time
from collections.abc import Callable, Iterator, Sequence


def leibniz() -> Iterator[float]:
    """Partial sums of 4 * (1 - 1/3 + 1/5 - ...), starting after the 1/3 term."""
    value = 1.0
    denominator = 3.0
    subtract = True
    while True:
        if subtract:
            value -= 1 / denominator
        else:
            value += 1 / denominator
        denominator += 2
        subtract = not subtract
        yield value * 4


def euler() -> Iterator[float]:
    """sqrt(6 * (1 + 1/4 + 1/9 + ...)) after each added term."""
    total = 0.0
    denominator = 1.0
    while True:
        total += 1 / (denominator * denominator)
        denominator += 1
        yield math.sqrt(total * 6)


def _odd_primes() -> Iterator[int]:
    found: list[int] = []
    candidate = 3
    while True:
        limit = math.isqrt(candidate)
        if all(candidate % p for p in found if p <= limit):
            found.append(candidate)
            yield candidate
        candidate += 2


def prime_product() -> Iterator[float]:
    """2 / prod(1 -+ 1/p) over the odd primes, + for p = 1 mod 4."""
    product = 1.0
    for prime in _odd_primes():
        if (prime - 1) % 4 == 0:
            product *= 1 + 1 / prime
        else:
            product *= 1 - 1 / prime
        yield 2 / product


_SERIES: dict[str, tuple[Callable[[], Iterator[float]], float]] = {
    "leibniz": (leibniz, 4.0),
    "Leibniz": (leibniz, 4.0),
    "euler": (euler, 0.0),
    "Euler": (euler, 0.0),
    "prime": (prime_product, 2.0),
    "Prime": (prime_product, 2.0),
}


def approximate(method: str, stop: Callable[[], bool]) -> float:
    """Refine the approximation named ``method`` until ``stop()`` returns True.

    ``stop`` is checked before every step. Unknown methods return ``math.pi``.
    """
    entry = _SERIES.get(method)
    if entry is None:
        return math.pi
    series, value = entry
    values = series()
    while not stop():
        value = next(values)
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Approximate pi with the named method until interrupted, then print it."""
    parser = argparse.ArgumentParser(prog="pi")
    parser.add_argument("method", nargs="?", default="")
    parser.add_argument("--live", action="store_true", help="show the running value")
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    entry = _SERIES.get(args.method)
    if entry is None:
        print(math.pi)
        return 0

    stopped = threading.Event()

    def handler(signum: int, frame: object) -> None:
        stopped.set()

    previous = {sig: signal.signal(sig, handler) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        series, value = entry
        values = series()
        while not stopped.is_set():
            value = next(values)
            if args.live:
                print(f"\r{value!r}", end="", flush=True)
                time.sleep(0.002)
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)
    if args.live:
        print("\r", end="")
    print(repr(value))
    return 0