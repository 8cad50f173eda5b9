"""A binary search tree with lookups, traversals, validation and deletion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class BSTNode:
    """One node of a binary tree."""

    data: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None

    def __repr__(self) -> str:
        return f"BSTNode({self.data!r})"


def is_binary_search_tree(root: Optional[BSTNode]) -> bool:
    """Check the ordering by comparing every subtree against its root.

    Values in a left subtree must be <= the root, values in a right subtree
    must be > the root. Subtrees are revisited at every level.
    """

    def all_lesser(node: Optional[BSTNode], value: Any) -> bool:
        if node is None:
            return True
        return (
            node.data <= value
            and all_lesser(node.left, value)
            and all_lesser(node.right, value)
        )

    def all_greater(node: Optional[BSTNode], value: Any) -> bool:
        if node is None:
            return True
        return (
            node.data > value
            and all_greater(node.left, value)
            and all_greater(node.right, value)
        )

    if root is None:
        return True
    return (
        all_lesser(root.left, root.data)
        and all_greater(root.right, root.data)
        and is_binary_search_tree(root.left)
        and is_binary_search_tree(root.right)
    )


def is_binary_search_tree_bounded(
    root: Optional[BSTNode],
    min_value: Any = None,
    max_value: Any = None,
) -> bool:
    """Check that every value lies strictly between the bounds its ancestors set.

    A bound of None means unbounded on that side.
    """
    if root is None:
        return True
    if min_value is not None and not root.data > min_value:
        return False
    if max_value is not None and not root.data < max_value:
        return False
    return is_binary_search_tree_bounded(
        root.left, min_value, root.data
    ) and is_binary_search_tree_bounded(root.right, root.data, max_value)


class BinarySearchTree:
    """Binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[BSTNode] = None
        for value in values:
            self.insert(value)

    @property
    def root(self) -> Optional[BSTNode]:
        """The root node, or None when the tree is empty."""
        return self._root

    def insert(self, data: Any) -> None:
        """Add ``data`` at the leaf position its value dictates."""
        node = BSTNode(data)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if data <= current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, data: Any) -> bool:
        current = self._root
        while current is not None:
            if current.data == data:
                return True
            current = current.left if data < current.data else current.right
        return False

    def min(self) -> Any:
        """Return the smallest value, found by walking left."""
        if self._root is None:
            raise ValueError("Binary Search Tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def max(self) -> Any:
        """Return the largest value, found by walking right."""

        def rightmost(node: BSTNode) -> Any:
            if node.right is None:
                return node.data
            return rightmost(node.right)

        if self._root is None:
            raise ValueError("Binary Search Tree is empty")
        return rightmost(self._root)

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""

        def node_height(node: Optional[BSTNode]) -> int:
            if node is None:
                return -1
            return max(node_height(node.left), node_height(node.right)) + 1

        return node_height(self._root)

    def level_order(self) -> list[Any]:
        """Values breadth first, level by level, left to right."""
        if self._root is None:
            return []
        values = []
        queue: deque[BSTNode] = deque([self._root])
        while queue:
            node = queue.popleft()
            values.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return values

    def pre_order(self) -> list[Any]:
        """Values depth first as root, left, right."""

        def walk(node: Optional[BSTNode]) -> Iterator[Any]:
            if node is None:
                return
            yield node.data
            yield from walk(node.left)
            yield from walk(node.right)

        return list(walk(self._root))

    def in_order(self) -> list[Any]:
        """Values depth first as left, root, right: ascending order."""

        def walk(node: Optional[BSTNode]) -> Iterator[Any]:
            if node is None:
                return
            yield from walk(node.left)
            yield node.data
            yield from walk(node.right)

        return list(walk(self._root))

    def post_order(self) -> list[Any]:
        """Values depth first as left, right, root."""

        def walk(node: Optional[BSTNode]) -> Iterator[Any]:
            if node is None:
                return
            yield from walk(node.left)
            yield from walk(node.right)
            yield node.data

        return list(walk(self._root))

    def is_valid(self) -> bool:
        """Whether the tree satisfies the search-tree ordering."""
        return is_binary_search_tree(self._root)

    def delete(self, data: Any) -> bool:
        """Remove one node holding ``data``; return whether one was found."""
        removed = False

        def delete_from(node: Optional[BSTNode], value: Any) -> Optional[BSTNode]:
            nonlocal removed
            if node is None:
                return None
            if node.data < value:
                node.right = delete_from(node.right, value)
            elif node.data > value:
                node.left = delete_from(node.left, value)
            else:
                removed = True
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.data = successor.data
                node.right = delete_from(node.right, successor.data)
            return node

        self._root = delete_from(self._root, data)
        return removed

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.pre_order()!r})"