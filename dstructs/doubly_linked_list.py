"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class DoublyNode:
    """One link of a doubly linked list."""

    data: Any
    next: Optional[DoublyNode] = None
    prev: Optional[DoublyNode] = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.data!r})"


class DoublyLinkedList:
    """Doubly linked list with insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[DoublyNode] = None
        self._tail: Optional[DoublyNode] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    @property
    def head(self) -> Optional[DoublyNode]:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[DoublyNode]:
        """The last node, or None when the list is empty."""
        return self._tail

    def insert_at_head(self, data: Any) -> None:
        """Insert ``data`` before the current first node."""
        node = DoublyNode(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._size += 1

    def insert_at_tail(self, data: Any) -> None:
        """Insert ``data`` after the current last node."""
        node = DoublyNode(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def forward_string(self) -> str:
        """Render the values from first to last."""
        return "Forward: " + "".join(f"{value} " for value in self)

    def reverse_string(self) -> str:
        """Render the values from last to first, following the back links."""
        return "Reverse: " + "".join(f"{value} " for value in reversed(self))

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"