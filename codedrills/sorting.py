"""In-place insertion sort."""

from __future__ import annotations

from typing import Any, MutableSequence


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place in ascending order; equal items keep their order."""
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key