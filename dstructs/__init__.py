"""Linked lists, stacks, queues, binary search trees, expression parsing, convex hulls and a small logger."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "convex_hull",
    "doubly_linked_list",
    "expressions",
    "linked_list",
    "logger",
    "queues",
    "stacks",
]