"""A self-balancing AVL binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0."""

    key: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 0


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(top: AVLNode) -> AVLNode:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    _update_height(top)
    _update_height(pivot)
    return pivot


def _rotate_left(top: AVLNode) -> AVLNode:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    _update_height(top)
    _update_height(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    return _rebalance(node)


def _preorder(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _postorder(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def _sideways(node: Optional[AVLNode], depth: int) -> Iterator[str]:
    if node is not None:
        yield from _sideways(node.right, depth + 1)
        yield "\t" * depth + str(node.key)
        yield from _sideways(node.left, depth + 1)


class AVLTree:
    """An AVL tree holding distinct, mutually comparable keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        if key in self:
            return False
        self.root = _insert(self.root, key)
        self._size += 1
        return True

    def remove(self, key: Any) -> None:
        """Delete ``key``; raise KeyError if it is not in the tree."""
        if key not in self:
            raise KeyError(key)
        self.root = _remove(self.root, key)
        self._size -= 1

    def find(self, key: Any) -> Optional[AVLNode]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return self._size

    def preorder(self) -> list[Any]:
        """Keys in root, left, right order."""
        return list(_preorder(self.root))

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return list(_inorder(self.root))

    def postorder(self) -> list[Any]:
        """Keys in left, right, root order."""
        return list(_postorder(self.root))

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, one tab per level."""
        return "\n".join(_sideways(self.root, 0))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"