"""An unbalanced binary search tree ordered by a comparator.

A comparator takes two data items and returns a negative number, zero or a
positive number.  Items comparing less than or equal to a node go to its left.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional

Comparator = Callable[[Any, Any], int]


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A binary search tree; iterating yields the data in infix order."""

    def __init__(self, cmp: Comparator, items: Iterable[Any] = ()) -> None:
        self.cmp = cmp
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[Any]:
        return self.iter_infix()

    def push(self, data: Any) -> None:
        """Insert data as a new leaf; equal items go to the left."""
        node = _Node(data)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if self.cmp(data, current.data) <= 0:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _infix_nodes(self) -> Iterator[_Node]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def find(self, data: Any) -> Any:
        """First stored item, in infix order, that compares equal to data, or None."""
        return next(
            (node.data for node in self._infix_nodes() if self.cmp(data, node.data) == 0),
            None,
        )

    def iter_prefix(self) -> Iterator[Any]:
        """Yield each node before its left and then its right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def iter_infix(self) -> Iterator[Any]:
        """Yield the left subtree, the node, then the right subtree."""
        return (node.data for node in self._infix_nodes())

    def iter_suffix(self) -> Iterator[Any]:
        """Yield the left and right subtrees before each node."""
        if self._root is None:
            return
        stack = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.data
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def level_count(self) -> int:
        """Height of the tree in edges: 0 for a single node.

        An empty tree raises ValueError.
        """
        if self._root is None:
            raise ValueError("an empty tree has no levels")
        depth = -1
        level = [self._root]
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child]
        return depth

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the tree, passing every item to delete in suffix order."""
        items = list(self.iter_suffix())
        self._root = None
        self._size = 0
        if delete is not None:
            for item in items:
                delete(item)