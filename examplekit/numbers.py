"""Small number-theory helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator

_UINT64 = 1 << 64
_INTEGER = re.compile(r"[+-]?[0-9]+")


def absolute(x: int) -> int:
    """Absolute value of ``x``."""
    return x if x > 0 else -x


def isqrt(n: int) -> int:
    """Integer square root by the digit-by-digit method (exact below 2**32).

    Negative input yields 0.
    """
    t = n
    result = 0
    p = 1 << 30
    while p > t:
        p >>= 2
    while p:
        b = result | p
        result >>= 1
        if t >= b:
            t -= b
            result |= p
        p >>= 2
    return result


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime number, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    primes = [2]
    num = 3
    while len(primes) < n:
        limit = isqrt(num)
        composite = False
        for p in primes:
            if num % p == 0:
                composite = True
                break
            if p > limit:
                break
        if not composite:
            primes.append(num)
        num += 2
    return primes[n - 1]


def _trunc_mod(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm (truncating remainder)."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    divisor = gcd(a, b)
    product = a * b
    quotient = abs(product) // abs(divisor)
    return -quotient if (product < 0) != (divisor < 0) and quotient else quotient


def ackermann(n: int, m: int) -> int:
    """The Ackermann function A(n, m) for non-negative arguments."""
    if n < 0 or m < 0:
        raise ValueError("ackermann needs non-negative arguments")
    stack = [n]
    while stack:
        level = stack.pop()
        if level == 0:
            m += 1
        elif m == 0:
            m = 1
            stack.append(level - 1)
        else:
            stack.append(level - 1)
            stack.append(level)
            m -= 1
    return m


def factorial(num: int) -> int:
    """Product 1 * 2 * ... * num; ``factorial(0)`` is 0."""
    if num < 0:
        raise ValueError("factorial needs a non-negative argument")
    if num == 0:
        return 0
    result = 1
    for k in range(2, num + 1):
        result *= k
    return result


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers 0, 1, 1, 2, 3, ... without end."""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def fibonacci_numbers(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers in unsigned 64-bit arithmetic."""
    numbers = []
    a, b = 0, 1
    for _ in range(n):
        numbers.append(a)
        a, b = b, (a + b) % _UINT64
    return numbers


def ordinal(value: int | str) -> str:
    """English ordinal form of an integer, such as ``1st`` or ``12th``."""
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    number = int(text)
    last_digit = text[-1]
    last_two = 0
    if number >= 10:
        tail = text[-2:]
        last_two = int(tail) if _INTEGER.fullmatch(tail) else 0
    if 10 < last_two < 20:
        suffix = "th"
    else:
        suffix = {"1": "st", "2": "nd", "3": "rd"}.get(last_digit, "th")
    return f"{number}{suffix}"


def total(*args: int) -> int:
    """Sum of all arguments."""
    result = 0
    for number in args:
        result += number
    return result