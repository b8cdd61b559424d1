"""CLI / terminal mode for WordCraft."""

from __future__ import annotations

import argparse
import logging

from wordcraft.dictionary import WordList


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def describe(words: WordList, query: str) -> str:
    """One-line word/prefix status for *query*."""
    return (
        f"{query!r:<20} word={_yes_no(words.is_valid(query))}"
        f"  prefix={_yes_no(words.has_prefix(query))}"
    )


def print_help() -> None:
    print("Commands:")
    print("  add WORD [WORD ...]   -- add one or more words")
    print("  word WORD             -- is WORD stored exactly?")
    print("  prefix PREFIX         -- does any stored word start with PREFIX?")
    print("  help                  -- show this list")
    print("  done                  -- quit")


def run_cli(words: WordList) -> None:
    """Interactive add / query loop in the terminal."""
    print("\n" + "=" * 60)
    print(f"  WORDCRAFT -- {len(words):,} words loaded")
    print("=" * 60)
    print()
    print_help()
    print()

    while True:
        try:
            inp = input("  wordcraft> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd, _, arg = inp.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("done", "quit", "exit"):
            break
        if cmd == "help":
            print_help()
        elif cmd == "add":
            added = arg.split()
            if not added:
                print("  Format: add WORD [WORD ...]")
                continue
            for w in added:
                words.add(w)
            print(f"  Added {len(added)} word(s).")
        elif cmd == "word":
            print(f"  {arg!r} is {'' if words.is_valid(arg) else 'not '}a word")
        elif cmd == "prefix":
            print(f"  {arg!r} is {'' if words.has_prefix(arg) else 'not '}a prefix")
        elif cmd:
            print("  Unknown command.  Type 'help' for the list.")


def run_queries(words: WordList, queries: list[str]) -> None:
    """Answer each query on its own line and return."""
    for q in queries:
        print(describe(words, q))


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordcraft",
        description="WordCraft -- word and prefix lookups backed by a trie",
    )
    parser.add_argument("queries", nargs="*", metavar="QUERY",
                        help="Strings to look up; omit for interactive mode")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--no-fallback", action="store_true",
                        help="Start empty instead of using the built-in word list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict, fallback=not args.no_fallback)

    if args.queries:
        run_queries(words, args.queries)
    else:
        run_cli(words)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
