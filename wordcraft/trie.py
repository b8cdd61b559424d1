"""Prefix trie for fast word and prefix lookups."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Prefix trie storing a set of strings.

    Each edge is one character; a word is stored when the node at the end
    of its path has ``is_word`` set.  The root carries no character and is
    only terminal once the empty string has been added.
    """

    def __init__(self):
        self.root = TrieNode()

    def add(self, word: str) -> None:
        """Store *word*, creating any missing nodes along its path."""
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def contains(self, word: str) -> bool:
        """True if *word* was added exactly."""
        node = self._walk(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        """True if some added word starts with *prefix* (always true for "")."""
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
