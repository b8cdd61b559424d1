from __future__ import annotations

import pytest

from wordcraft import dictionary
from wordcraft.trie import Trie


@pytest.fixture
def greeting_trie() -> Trie:
    trie = Trie()
    trie.add("hello")
    trie.add("world")
    trie.add("hi")
    return trie


@pytest.fixture
def no_default_paths(monkeypatch):
    """Keep word-list loading away from files on the host."""
    monkeypatch.setattr(dictionary, "default_search_paths", lambda: [])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# sample list\ncat\n\ncar\n  cart  \nx\n", encoding="utf-8")
    return path
