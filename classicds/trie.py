"""A prefix tree of strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end_of_word: bool = False


class Trie:
    """Stores words so that whole-word lookups cost O(len(word))."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for key in keys:
            self.insert(key)

    def insert(self, key: str) -> None:
        """Add ``key``; a key that is a prefix of another only marks its end."""
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end_of_word = True

    def search(self, key: str) -> bool:
        """Return True if ``key`` was inserted as a whole word."""
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.is_end_of_word

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)