"""Summing the odd Fibonacci numbers below a bound."""

from __future__ import annotations


def odd_fibonacci_sum(threshold: int) -> int:
    """Return the sum of the odd Fibonacci terms 1, 1, 3, 5, ... that are below ``threshold``."""
    total = 0
    previous, current = 0, 1
    while current < threshold:
        if current % 2:
            total += current
        previous, current = current, previous + current
    return total