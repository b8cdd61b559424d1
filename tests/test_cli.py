from __future__ import annotations

import builtins

import pytest

from wordcraft import cli
from wordcraft.dictionary import WordList


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


def test_one_shot_queries(word_file, no_default_paths, capsys):
    assert cli.main(["--dict", str(word_file), "car", "ca", "dog"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert "'car'" in out[0] and "word=yes" in out[0] and "prefix=yes" in out[0]
    assert "word=no" in out[1] and "prefix=yes" in out[1]
    assert "word=no" in out[2] and "prefix=no" in out[2]


def test_no_fallback_flag(no_default_paths, capsys):
    cli.main(["--no-fallback", "hello"])
    out = capsys.readouterr().out
    assert "word=no" in out
    assert "prefix=no" in out


def test_interactive_session(monkeypatch, no_default_paths, capsys):
    words = WordList(fallback=False)
    feed(monkeypatch, [
        "add cat car",
        "word cat",
        "word ca",
        "prefix ca",
        "prefix z",
        "bogus",
        "done",
        "word never-reached",
    ])
    cli.run_cli(words)
    out = capsys.readouterr().out
    assert "Added 2 word(s)." in out
    assert "'cat' is a word" in out
    assert "'ca' is not a word" in out
    assert "'ca' is a prefix" in out
    assert "'z' is not a prefix" in out
    assert "Unknown command" in out
    assert "never-reached" not in out
    assert words.trie.contains("car")


def test_interactive_empty_queries(monkeypatch, no_default_paths, capsys):
    words = WordList(fallback=False)
    feed(monkeypatch, ["prefix", "word", "add"])
    cli.run_cli(words)
    out = capsys.readouterr().out
    assert "'' is a prefix" in out
    assert "'' is not a word" in out
    assert "Format: add" in out


def test_interactive_ends_on_eof(monkeypatch, no_default_paths):
    words = WordList(fallback=False)
    feed(monkeypatch, [])
    cli.run_cli(words)


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_verbose_flag(flag, word_file, no_default_paths, capsys):
    assert cli.main([flag, "--dict", str(word_file), "cat"]) == 0
    assert "word=yes" in capsys.readouterr().out
