import math
from itertools import islice

import pytest

from examplekit.numbers import (
    absolute,
    ackermann,
    factorial,
    fibonacci,
    fibonacci_numbers,
    gcd,
    isqrt,
    lcm,
    nth_prime,
    ordinal,
    total,
)


@pytest.mark.parametrize("x", [-7, -1, 0, 1, 42])
def test_absolute(x):
    assert absolute(x) == absolute(-x)
    assert absolute(x) >= 0
    assert absolute(x) in (x, -x)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 8, 9, 15, 16, 99, 10**6, 2**31 - 1, 2**31])
def test_isqrt_matches_reference(n):
    assert isqrt(n) == math.isqrt(n)


def test_isqrt_negative_is_zero():
    assert isqrt(-9) == 0


def test_first_prime_is_two():
    assert nth_prime(1) == 2


def test_primes_increase_and_are_prime():
    primes = [nth_prime(k) for k in range(1, 40)]
    assert primes == sorted(set(primes))
    for p in primes:
        assert all(p % d for d in range(2, math.isqrt(p) + 1))


def test_no_prime_skipped():
    primes = {nth_prime(k) for k in range(1, 30)}
    top = max(primes)
    for candidate in range(2, top + 1):
        is_prime = all(candidate % d for d in range(2, math.isqrt(candidate) + 1))
        assert (candidate in primes) == is_prime


@pytest.mark.parametrize("n", [0, -3])
def test_nth_prime_rejects_non_positive(n):
    with pytest.raises(ValueError):
        nth_prime(n)


@pytest.mark.parametrize("a,b", [(6, 16), (15, 230), (17, 5), (0, 9), (9, 0), (12, 24)])
def test_gcd_and_lcm(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert lcm(a, b) == math.lcm(a, b)


def test_gcd_zero_zero():
    assert gcd(0, 0) == 0


def test_lcm_zero_zero_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


@pytest.mark.parametrize("m", range(6))
def test_ackermann_closed_forms(m):
    assert ackermann(0, m) == m + 1
    assert ackermann(1, m) == m + 2
    assert ackermann(2, m) == 2 * m + 3
    assert ackermann(3, m) == 2 ** (m + 3) - 3


def test_ackermann_negative():
    with pytest.raises(ValueError):
        ackermann(-1, 2)


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_zero_is_zero():
    assert factorial(0) == 0


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-2)


def test_fibonacci_recurrence():
    values = list(islice(fibonacci(), 50))
    assert values[:2] == [0, 1]
    assert all(values[k] == values[k - 1] + values[k - 2] for k in range(2, 50))


def test_fibonacci_numbers_wrap_to_uint64():
    values = fibonacci_numbers(140)
    assert len(values) == 140
    assert all(0 <= v < 2**64 for v in values)
    assert values == [v % 2**64 for v in islice(fibonacci(), 140)]


def test_fibonacci_numbers_empty():
    assert fibonacci_numbers(0) == []


@pytest.mark.parametrize("n", range(11, 20))
def test_ordinal_teens(n):
    assert ordinal(n) == f"{n}th"
    assert ordinal(n + 100) == f"{n + 100}th"


@pytest.mark.parametrize("n", [1, 21, 101, 1001])
def test_ordinal_st(n):
    assert ordinal(n) == f"{n}st"


@pytest.mark.parametrize("n", [2, 22, 102])
def test_ordinal_nd(n):
    assert ordinal(str(n)) == f"{n}nd"


@pytest.mark.parametrize("n", [3, 23, 53])
def test_ordinal_rd(n):
    assert ordinal(n) == f"{n}rd"


@pytest.mark.parametrize("n", [0, 4, 10, 20, 100, 57])
def test_ordinal_th(n):
    assert ordinal(n) == f"{n}th"


@pytest.mark.parametrize("bad", ["abc", "", "1.5", "12a"])
def test_ordinal_rejects_non_integers(bad):
    with pytest.raises(ValueError):
        ordinal(bad)


def test_total():
    numbers = [3, 5, 7, 9]
    assert total(*numbers) == sum(numbers)
    assert total() == 0