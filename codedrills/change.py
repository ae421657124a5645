"""Greedy counting of banknotes for an amount."""

from __future__ import annotations

_DENOMINATIONS = (100, 50, 30, 20, 10, 5, 2, 1)


def count_notes(amount: int) -> int:
    """Return how many notes a greedy pick from the largest denomination down uses."""
    count = 0
    for denomination in _DENOMINATIONS:
        notes, amount = divmod(amount, denomination)
        count += notes
    return count