"""FIFO queues built on a circular array and on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dstructs.linked_list import Node

MAX_SIZE = 101


class QueueFull(OverflowError):
    """Raised when enqueuing onto a full bounded queue."""


class QueueEmpty(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class ArrayQueue:
    """Queue kept in a circular array of fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    @property
    def capacity(self) -> int:
        """The largest number of elements the queue can hold."""
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFull("Queue is full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmpty("Queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise QueueEmpty("Queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self)


class LinkedQueue:
    """Unbounded queue: enqueue at the tail node, dequeue at the head node."""

    def __init__(self) -> None:
        self._front: Optional[Node] = None
        self._rear: Optional[Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self._front is None:
            raise QueueEmpty("Queue is empty!")
        removed = self._front
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._front = removed.next
        self._size -= 1
        return removed.data

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if self._front is None:
            raise QueueEmpty("Queue is empty!")
        return self._front.data

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self)