"""Odd composites that are not a prime plus twice a square."""

from __future__ import annotations

from itertools import count
from math import isqrt


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number, by trial division."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def _is_prime_plus_twice_square(n: int) -> bool:
    return any(is_prime(n - 2 * i * i) for i in range(isqrt(n // 2) + 1))


def goldbach_conjecture() -> str:
    """Return the first two odd composites that are not a prime plus twice a square.

    The result is the two numbers joined by a comma, smallest first.
    """
    found = []
    for number in count(9, 2):
        if not _is_prime_plus_twice_square(number):
            found.append(number)
            if len(found) == 2:
                break
    return ",".join(str(number) for number in found)