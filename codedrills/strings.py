"""String puzzles: palindromes, anagrams and the longest unrepeated run."""

from __future__ import annotations


def _letters(s: str) -> str:
    """Keep alphabetic characters only, lower-casing the ASCII ones."""
    return "".join(c.lower() if c.isascii() else c for c in s if c.isalpha())


def is_palindrome(s: str) -> bool:
    """Return True if the letters of ``s`` read the same both ways.

    Case and every non-alphabetic character are ignored.
    """
    letters = _letters(s)
    return letters == letters[::-1]


def are_anagrams(s1: str, s2: str) -> bool:
    """Return True if the letters of ``s1`` and ``s2`` are rearrangements of each other.

    Case and every non-alphabetic character are ignored.
    """
    return sorted(_letters(s1)) == sorted(_letters(s2))


def longest_substring_without_repeating_chars(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best