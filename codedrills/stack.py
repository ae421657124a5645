"""A simple stack and a bracket matcher built on it."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_PAIRS = {")": "(", "}": "{", "]": "["}


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def push(self, val: T) -> None:
        self._data.append(val)

    def pop(self) -> Optional[T]:
        """Remove and return the top value, or None if the stack is empty."""
        return self._data.pop() if self._data else None

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None if empty."""
        return self._data[-1] if self._data else None

    def clear(self) -> None:
        self._data.clear()

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down."""
        return reversed(self._data)


def bracket_match(text: str) -> bool:
    """Return True if every bracket in ``text`` is properly matched and nested."""
    stack: Stack[str] = Stack()
    for char in text:
        if char in "({[":
            stack.push(char)
        elif char in _PAIRS:
            if stack.pop() != _PAIRS[char]:
                return False
    return stack.is_empty()