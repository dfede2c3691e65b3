"""Interactive autocomplete, autocorrect and plagiarism check."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from os import PathLike

from .autocorrect import autocorrect_text
from .plagiarism import detect_plagiarism
from .trie import Trie


def load_dictionary(path: str | PathLike[str]) -> list[str]:
    """Read whitespace-separated words from ``path``, lowercased."""
    with open(path, encoding="utf-8") as f:
        return [word.lower() for word in f.read().split()]


def _read_prefix(lines: Iterator[str]) -> tuple[str, str]:
    """Return the first word of input and what follows it on its line.

    One character after the word is dropped, as a line-oriented reader would
    drop the newline ending the prefix entry.
    """
    for line in lines:
        tokens = line.split()
        if tokens:
            token = tokens[0]
            end = line.index(token) + len(token)
            return token, line[end + 1 :]
    return "", ""


def _sentence_lines(leftover: str, lines: Iterator[str]) -> Iterator[str]:
    if leftover:
        yield leftover.rstrip("\n")
    for line in lines:
        yield line.rstrip("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Autocomplete a prefix, autocorrect a text and check it for banned phrases."
    )
    parser.add_argument("--dictionary", default="dictionary.txt", help="word list file")
    parser.add_argument("--banned", default="banned.txt", help="banned phrases file")
    args = parser.parse_args(argv)

    print("Loading dictionary...")
    try:
        dictionary = load_dictionary(args.dictionary)
    except OSError:
        print(f"ERROR: Could not open {args.dictionary}", file=sys.stderr)
        return 1

    trie = Trie()
    for word in dictionary:
        trie.insert(word)
    print(f"Loaded {len(dictionary)} words into the Trie.")

    print("Enter a prefix to autocomplete: ", end="", flush=True)
    lines = iter(sys.stdin)
    prefix, leftover = _read_prefix(lines)
    prefix = prefix.lower()

    print("Suggestions: ")
    for suggestion in trie.suggestions(prefix):
        print(suggestion)

    print("\nEnter a sentence to autocorrect (end with '$'):")
    parts = []
    for line in _sentence_lines(leftover, lines):
        if line == "$":
            break
        parts.append(line + " ")
    full_text = "".join(parts).lower()

    corrected = autocorrect_text(full_text, dictionary)
    print("\nCorrected Output:")
    print("".join(word + " " for word in corrected))

    print("\n--- Plagiarism Detection ---")
    try:
        flagged = detect_plagiarism(full_text, args.banned)
    except OSError:
        print(f"ERROR: Could not open {args.banned}", file=sys.stderr)
        flagged = []
    if not flagged:
        print("No plagiarized phrases detected.")
    for phrase in flagged:
        print(f"Plagiarized phrase found: {phrase}")
    return 0


if __name__ == "__main__":
    sys.exit(main())