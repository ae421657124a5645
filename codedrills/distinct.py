"""Counting distinct comma-separated elements."""

from __future__ import annotations


def count_distinct(input_str: str) -> int:
    """Return how many distinct elements ``input_str`` holds when split on commas."""
    return len(set(input_str.split(",")))