# dstructs

Small, dependency-free implementations of classic data structures and
algorithms:

- `dstructs.linked_list`: a singly linked list with 1-based positional
  insertion and deletion and three ways of reversing it
- `dstructs.doubly_linked_list`: a doubly linked list with insertion at
  either end
- `dstructs.stacks`: a bounded array stack, a linked stack and string
  reversal through a stack
- `dstructs.queues`: a bounded circular-array queue and a linked queue
- `dstructs.bst`: a binary search tree with lookups, traversals,
  validation and deletion
- `dstructs.expressions`: bracket matching, postfix evaluation and
  infix-to-postfix conversion
- `dstructs.convex_hull`: a Graham-scan convex hull of integer points
- `dstructs.logger`: a minimal level-filtered logger

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Linked lists

Positions are 1-based. `insert` and `delete` raise `IndexError` for a
position outside the list.

```python
from dstructs.linked_list import LinkedList

items = LinkedList([2, 3])
items.insert(4, 1)          # 4 2 3
items.insert(6, 2)          # 4 6 2 3
items.delete(1)             # returns 4; list is 6 2 3
items.reverse()             # 3 2 6
print(list(items))          # [3, 2, 6]
print(items.reversed_values())  # [6, 2, 3], links unchanged
print(items)                # List: 3 2 6
```

`push_front(data)` inserts at the head. `reverse_recursive()` and
`reverse_with_stack()` reverse the links in place by other means.

```python
from dstructs.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList([])
for value in (2, 4, 8, 16):
    dll.insert_at_head(value)
dll.insert_at_tail(1)
print(dll.forward_string())    # Forward: 16 8 4 2 1
print(dll.reverse_string())    # Reverse: 1 2 4 8 16
print(list(reversed(dll)))     # [1, 2, 4, 8, 16]
```

### Stacks

```python
from dstructs.stacks import ArrayStack, LinkedStack, reverse_string

stack = ArrayStack(101)
stack.push(2)
stack.push(5)
stack.pop()                 # 5
print(stack.top())          # 2
print(stack)                # Stack: 2

linked = LinkedStack()
linked.push(1)
linked.push(2)
print(list(linked))         # [2, 1], top first

print(reverse_string("hello"))    # olleh
```

`ArrayStack` raises `StackOverflow` when pushed while full; both stacks
raise `StackEmpty` from `pop()` or `top()` while empty.

### Queues

```python
from dstructs.queues import ArrayQueue, LinkedQueue

queue = ArrayQueue(101)
queue.enqueue(2)
queue.enqueue(4)
queue.dequeue()             # 2
print(queue.front())        # 4

linked = LinkedQueue()
linked.enqueue("a")
linked.enqueue("b")
print(list(linked))         # ['a', 'b']
```

`ArrayQueue` is a circular buffer; it raises `QueueFull` when enqueued
while full. Both queues raise `QueueEmpty` from `dequeue()` or `front()`
while empty, and offer `is_empty()`.

### Binary search trees

Equal values go into the left subtree.

```python
from dstructs.bst import BinarySearchTree

tree = BinarySearchTree([15, 10, 20, 25, 8, 12])
print(12 in tree)           # True
print(tree.min(), tree.max())     # 8 25
print(tree.height())        # 2 (edges; -1 for an empty tree)
print(tree.in_order())      # [8, 10, 12, 15, 20, 25]
print(tree.pre_order())     # [15, 10, 8, 12, 20, 25]
print(tree.post_order())    # [8, 12, 10, 25, 20, 15]
print(tree.level_order())   # [15, 10, 20, 8, 12, 25]
print(tree.delete(12))      # True
print(tree.is_valid())      # True
```

`min()` and `max()` raise `ValueError` on an empty tree. `delete` returns
whether a node was removed. The module-level functions
`is_binary_search_tree(root)` and
`is_binary_search_tree_bounded(root, min_value, max_value)` check any tree
of `BSTNode` objects; a bound of `None` means unbounded.

### Expressions

```python
from dstructs.expressions import (
    are_parentheses_balanced,
    evaluate_postfix,
    infix_to_postfix,
)

are_parentheses_balanced("{[()]}")   # True
are_parentheses_balanced("(]")       # False
infix_to_postfix("a+b*c")            # 'abc*+'
evaluate_postfix("2 3 *")            # 6
evaluate_postfix("12, 30 +")         # 42
```

In postfix evaluation operands are non-negative integers of any length,
spaces and commas separate tokens, and for each operator the most recently
pushed value is the left operand: `evaluate_postfix("2 3 -")` is `1`.
Division truncates toward zero. A malformed expression raises `ValueError`,
as does an unmatched `)` in `infix_to_postfix`. Infix operands are single
letters or digits.

### Convex hull

```python
from dstructs.convex_hull import Point, convex_hull

points = [Point(0, 3), Point(1, 1), Point(2, 2), Point(4, 4),
          Point(0, 0), Point(1, 2), Point(3, 1), Point(3, 3)]
hull = convex_hull(points, False)
```

The hull comes back clockwise, starting from the lowest, leftmost point.
Pass `True` to keep points that lie on hull edges. Plain `(x, y)` pairs are
accepted too; an empty input raises `ValueError`. `orientation`,
`is_clockwise` and `is_collinear` are available as well.

The command below prints the hull of that same sample set, one point per
line; `--include-collinear` keeps points on hull edges:

```
dstructs-hull
```

### Logging

```python
import sys
from dstructs.logger import Logger, LogLevel, log

logger = Logger(LogLevel.WARNING, sys.stdout)
logger.warn("disk almost full")   # [WARNING]: disk almost full
logger.info("not shown")
logger.level = LogLevel.INFO
log("Hello World!", sys.stdout)
```

With no stream given, output goes to standard output.

## What is not included

`dstructs-hull` is the only command, and it works only on its built-in
sample points; it does not read points from input. The other structures are
library code only, with no interactive or command-line front end.