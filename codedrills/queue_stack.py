"""A FIFO queue and a stack implemented on top of two queues."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._elements: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        self._elements.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise IndexError if empty."""
        if not self._elements:
            raise IndexError("Queue is empty")
        return self._elements.popleft()

    def peek(self) -> T:
        """Return the front value; raise IndexError if empty."""
        if not self._elements:
            raise IndexError("Queue is empty")
        return self._elements[0]

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)


class QueueStack(Generic[T]):
    """A last-in, first-out stack that uses only queue operations."""

    def __init__(self) -> None:
        self._q1: Queue[T] = Queue()
        self._q2: Queue[T] = Queue()

    def push(self, elem: T) -> None:
        self._q1.enqueue(elem)

    def pop(self) -> T:
        """Remove and return the most recent value; raise IndexError if empty."""
        if self.is_empty():
            raise IndexError("Stack is empty")
        while len(self._q1) > 1:
            self._q2.enqueue(self._q1.dequeue())
        top = self._q1.dequeue()
        self._q1, self._q2 = self._q2, self._q1
        return top

    def is_empty(self) -> bool:
        return self._q1.is_empty()