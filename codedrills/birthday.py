"""The birthday problem."""

from __future__ import annotations


def birthday_probability(n: int) -> float:
    """Return the chance that at least two of ``n`` people share a birthday (365 days)."""
    all_distinct = 1.0
    for i in range(n):
        all_distinct *= (365.0 - i) / 365.0
    return 1.0 - all_distinct