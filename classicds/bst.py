"""An unbalanced binary search tree and boundary traversal of binary trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinarySearchTree:
    """A plain binary search tree of distinct values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; an equal value already present is left alone."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def search(self, value: Any) -> Optional[TreeNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return list(_inorder(self.root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _leaves(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _leaves(node.left)
        if node.left is None and node.right is None:
            yield node.value
        yield from _leaves(node.right)


def _left_edge(node: Optional[TreeNode]) -> Iterator[Any]:
    """Non-leaf nodes down the left edge, top down."""
    while node is not None and (node.left is not None or node.right is not None):
        yield node.value
        node = node.left if node.left is not None else node.right


def _right_edge(node: Optional[TreeNode]) -> list[Any]:
    """Non-leaf nodes up the right edge, bottom up."""
    edge = []
    while node is not None and (node.left is not None or node.right is not None):
        edge.append(node.value)
        node = node.right if node.right is not None else node.left
    edge.reverse()
    return edge


def boundary_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return the anticlockwise boundary of the tree rooted at ``root``.

    The root comes first, then the left edge top down, then every leaf from
    left to right, then the right edge bottom up. No node appears twice.
    """
    if root is None:
        return []
    return [
        root.value,
        *_left_edge(root.left),
        *_leaves(root.left),
        *_leaves(root.right),
        *_right_edge(root.right),
    ]