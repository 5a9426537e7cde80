"""Binary trees: traversals and binary-search-tree operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "Node",
    "pre_order",
    "post_order",
    "in_order",
    "is_bst",
    "search",
    "search_recursive",
    "insert",
]


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def pre_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is not None:
        yield root.data
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def post_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.data


def in_order(root: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is not None:
        yield from in_order(root.left)
        yield root.data
        yield from in_order(root.right)


def is_bst(root: Optional[Node]) -> bool:
    """Return True if the in-order values are strictly increasing."""
    previous: Optional[int] = None
    for value in in_order(root):
        if previous is not None and value <= previous:
            return False
        previous = value
    return True


def search(root: Optional[Node], key: int) -> bool:
    """Return True if ``key`` is in the binary search tree."""
    while root is not None:
        if key == root.data:
            return True
        root = root.right if key > root.data else root.left
    return False


def search_recursive(root: Optional[Node], key: int) -> Optional[Node]:
    """Return the node holding ``key``, or None if it is absent."""
    if root is None or root.data == key:
        return root
    if root.data > key:
        return search_recursive(root.left, key)
    return search_recursive(root.right, key)


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` as a new leaf and return the root.

    Raises ValueError if the value is already in the tree.
    """
    new_node = Node(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value == node.data:
            raise ValueError(f"element {value!r} already present")
        if value < node.data:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right