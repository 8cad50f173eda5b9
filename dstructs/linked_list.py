"""A singly linked list with positional insertion, deletion and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """Singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the current first node."""
        self._head = Node(data, self._head)
        self._size += 1

    def insert(self, data: Any, position: int) -> None:
        """Insert ``data`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"insert position {position} out of range 1..{self._size + 1}"
            )
        if position == 1:
            self.push_front(data)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(data, previous.next)
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(
                f"delete position {position} out of range 1..{self._size}"
            )
        if position == 1:
            removed = self._head
            assert removed is not None
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.data

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"no node at position {position}")

    def reverse(self) -> None:
        """Reverse the links in place, iteratively."""
        previous: Optional[Node] = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the links in place, by recursion down to the last node."""
        if self._head is None:
            return

        def reverse_from(node: Node) -> Node:
            if node.next is None:
                return node
            new_head = reverse_from(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self._head = reverse_from(self._head)

    def reverse_with_stack(self) -> None:
        """Reverse the links in place, using a stack of nodes."""
        if self._head is None:
            return
        stack = list(self._nodes())
        current = stack.pop()
        self._head = current
        while stack:
            current.next = stack.pop()
            current = current.next
        current.next = None

    def reversed_values(self) -> list[Any]:
        """Return the values from last to first without changing the links."""

        def walk(node: Optional[Node]) -> Iterator[Any]:
            if node is None:
                return
            yield from walk(node.next)
            yield node.data

        return list(walk(self._head))

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "List: " + "".join(f"{value} " for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"