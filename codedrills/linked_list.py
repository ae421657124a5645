"""A singly linked list with in-place reversal and sorted merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    val: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A linked list that appends at the tail in constant time."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._start: Optional[_Node[T]] = None
        self._end: Optional[_Node[T]] = None
        self._length = 0
        for item in items or ():
            self.add(item)

    def add(self, obj: T) -> None:
        """Append a value at the end of the list."""
        node = _Node(obj)
        if self._end is None:
            self._start = node
        else:
            self._end.next = node
        self._end = node
        self._length += 1

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._start
        while node is not None:
            yield node
            node = node.next

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``, or None if there is no such position."""
        if index < 0:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node.val
        return None

    def reverse(self) -> None:
        """Reverse the order of the list in place."""
        previous: Optional[_Node[T]] = None
        current = self._start
        self._end = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._start = previous

    @classmethod
    def merge(cls, list_a: "LinkedList[T]", list_b: "LinkedList[T]") -> "LinkedList[T]":
        """Merge two ascending lists into a new ascending list.

        On ties the value from ``list_a`` comes first.
        """
        merged: LinkedList[T] = cls()
        a = list_a._start
        b = list_b._start
        while a is not None and b is not None:
            if a.val <= b.val:
                merged.add(a.val)
                a = a.next
            else:
                merged.add(b.val)
                b = b.next
        rest = a if a is not None else b
        while rest is not None:
            merged.add(rest.val)
            rest = rest.next
        return merged

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return (node.val for node in self._nodes())

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(value) for value in self)}])"