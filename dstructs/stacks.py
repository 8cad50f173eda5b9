"""Stacks built on a bounded array and on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dstructs.linked_list import Node

MAX_SIZE = 101


class StackOverflow(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class StackEmpty(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """Stack stored in an array of fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of elements the stack can hold."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Add ``value`` on top."""
        if len(self._items) == self._capacity:
            raise StackOverflow("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmpty("Stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmpty("Stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom element to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "Stack: " + "".join(f"{value} " for value in self)


class LinkedStack:
    """Unbounded stack whose top is the head of a chain of nodes."""

    def __init__(self) -> None:
        self._top: Optional[Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Add ``value`` on top."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackEmpty("Stack is empty")
        removed = self._top
        self._top = removed.next
        self._size -= 1
        return removed.data

    def top(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise StackEmpty("Stack is empty")
        return self._top.data

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top element to the bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self)


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing its characters onto a stack and popping them."""
    stack = LinkedStack()
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in range(len(stack)))