"""The largest prime factor of an integer."""

from __future__ import annotations

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_probably_prime(n: int) -> bool:
    """Miller-Rabin test of ``n`` with the first twelve primes as bases."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _BASES:
        if a >= n:
            break
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def find_max_prime_factor(n: int) -> int:
    """Return the largest prime factor of ``n``; 0 for 0 and 1 for 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0

    max_prime = 1
    for p in (2, 3, 5):
        while n % p == 0:
            max_prime = p
            n //= p

    i, jump = 7, 4
    while i * i <= n:
        while n % i == 0:
            max_prime = i
            n //= i
        i += jump
        jump = 6 - jump
        if n > 1 and is_probably_prime(n):
            return max(n, max_prime)

    if n > 1:
        max_prime = max(max_prime, n)
    return max_prime