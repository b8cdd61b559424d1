"""WordCraft — trie-backed word and prefix lookups."""

from wordcraft.trie import Trie, TrieNode
from wordcraft.dictionary import FALLBACK_WORDS, WordList

__all__ = [
    "FALLBACK_WORDS",
    "Trie",
    "TrieNode",
    "WordList",
]
