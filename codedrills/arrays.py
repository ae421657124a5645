"""Small array puzzles: missing number, duplicates, intersection, intervals."""

from __future__ import annotations

from typing import Iterable, Sequence


def find_missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``1..len(nums)+1`` that is absent from ``nums``."""
    n = len(nums) + 1
    return n * (n + 1) // 2 - sum(nums)


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return each repeated value once, in the order its first repeat appears."""
    seen: set[int] = set()
    reported: set[int] = set()
    duplicates: list[int] = []
    for num in nums:
        if num in seen:
            if num not in reported:
                duplicates.append(num)
                reported.add(num)
        else:
            seen.add(num)
    return duplicates


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, sorted ascending."""
    return sorted(set(nums1) & set(nums2))


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping inclusive ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged