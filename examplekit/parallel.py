"""Computing several primes one after another or in worker processes."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed

from examplekit.numbers import nth_prime

DEFAULT_REQUESTS = (200000, 500000, 100000, 250000, 550000, 150000, 350000, 300000)


def prime_requests(requests: Sequence[int], parallel: bool) -> list[tuple[int, int]]:
    """Return ``(n, nth_prime(n))`` for each request.

    Sequential results follow the request order; parallel results come in
    the order the workers finish.
    """
    if not parallel or not requests:
        return [(n, nth_prime(n)) for n in requests]
    with ProcessPoolExecutor() as pool:
        futures = {pool.submit(nth_prime, n): n for n in requests}
        return [(futures[f], f.result()) for f in as_completed(futures)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print primes; the first argument ``true`` selects parallel mode.

    Further arguments, if any, replace the default list of requests.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            "start this application with the argument true to compute "
            "primenumbers parallel or false for serial"
        )
        return 1
    try:
        requests = [int(a) for a in args[1:]] or list(DEFAULT_REQUESTS)
    except ValueError:
        print("requests must be whole numbers", file=sys.stderr)
        return 2
    for index, prime in prime_requests(requests, args[0] == "true"):
        print(f"the {index}th prime number is: {prime}")
    return 0