"""A binary heap ordered by a user-supplied comparator."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary heap; iterating over it drains values in heap order.

    ``comparator(a, b)`` returns True when ``a`` belongs above ``b``.
    """

    def __init__(self, comparator: Callable[[T, T], bool]) -> None:
        self._items: list[T] = []
        self._comparator = comparator

    @classmethod
    def min_heap(cls) -> "Heap[T]":
        return cls(operator.lt)

    @classmethod
    def max_heap(cls) -> "Heap[T]":
        return cls(operator.gt)

    def add(self, value: T) -> None:
        items = self._items
        items.append(value)
        idx = len(items) - 1
        while idx > 0:
            parent = (idx - 1) // 2
            if self._comparator(items[parent], items[idx]):
                break
            items[parent], items[idx] = items[idx], items[parent]
            idx = parent

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self

    def _preferred_child(self, idx: int) -> int:
        left = 2 * idx + 1
        right = left + 1
        if right >= len(self._items):
            return left
        if self._comparator(self._items[left], self._items[right]):
            return left
        return right

    def __next__(self) -> T:
        items = self._items
        if not items:
            raise StopIteration
        result = items[0]
        last = items.pop()
        if items:
            items[0] = last
            idx = 0
            while 2 * idx + 1 < len(items):
                child = self._preferred_child(idx)
                if self._comparator(items[idx], items[child]):
                    break
                items[idx], items[child] = items[child], items[idx]
                idx = child
        return result