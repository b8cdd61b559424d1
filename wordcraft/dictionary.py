"""Word list with trie-backed prefix search."""

from __future__ import annotations

import logging
import os

from wordcraft.trie import Trie

log = logging.getLogger("wordcraft")

# Used when no word file can be found.
FALLBACK_WORDS: frozenset[str] = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "can",
    "car", "cat", "day", "do", "dog", "for", "from", "game", "go", "had",
    "has", "he", "hello", "her", "hi", "his", "how", "i", "if", "in",
    "is", "it", "its", "me", "my", "new", "no", "not", "now", "of",
    "on", "one", "or", "our", "out", "play", "run", "see", "she", "so",
    "the", "to", "up", "us", "use", "was", "way", "we", "who", "word",
    "world", "yes", "you",
})


def default_search_paths() -> list[str]:
    """Candidate word files, in the order they are tried."""
    return [
        "words.txt",
        "dictionary.txt",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "dictionary.txt"),
        "/usr/share/dict/words",
    ]


class WordList:
    """Word list with both set-lookup and trie-based prefix search."""

    def __init__(
        self,
        path: str | None = None,
        *,
        min_length: int = 1,
        max_length: int | None = None,
        fallback: bool = True,
    ):
        self.words: set[str] = set()
        self.trie = Trie()
        self.source: str | None = None
        self.min_length = min_length
        self.max_length = max_length
        self._load(path, fallback)

    def _load(self, path: str | None, fallback: bool) -> None:
        search_paths: list[str] = []
        if path:
            if not os.path.exists(path):
                log.warning("Word file %s not found -- searching default locations.", path)
            search_paths.append(path)
        search_paths.extend(default_search_paths())

        for candidate in search_paths:
            if not os.path.exists(candidate):
                continue
            count = self._load_file(candidate)
            if count:
                self.source = candidate
                log.info("Loaded %s words from %s", f"{len(self.words):,}", candidate)
                return
            log.debug("No usable words in %s", candidate)

        if not fallback:
            log.warning("No word file found -- starting with an empty word list.")
            return

        log.warning("No word file found -- using built-in minimal word list.")
        for word in FALLBACK_WORDS:
            self.add(word)

    def _load_file(self, path: str) -> int:
        count = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith("#"):
                    continue
                if not self._accepts(word):
                    continue
                self.add(word)
                count += 1
        return count

    def _accepts(self, word: str) -> bool:
        if len(word) < self.min_length:
            return False
        return self.max_length is None or len(word) <= self.max_length

    def add(self, word: str) -> None:
        self.words.add(word)
        self.trie.add(word)

    def is_valid(self, word: str) -> bool:
        return word in self.words

    def has_prefix(self, prefix: str) -> bool:
        return self.trie.contains_prefix(prefix)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
