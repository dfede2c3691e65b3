"""Flagging of banned phrases in a text."""

from __future__ import annotations

from os import PathLike

from .kmp import kmp_search


def detect_plagiarism(text: str, banned_file: str | PathLike[str]) -> list[str]:
    """Return the non-empty lines of ``banned_file`` that occur in ``text``.

    Raises OSError if the file cannot be opened.
    """
    with open(banned_file, encoding="utf-8") as fin:
        phrases = [line.rstrip("\n") for line in fin]
    return [phrase for phrase in phrases if phrase and kmp_search(text, phrase)]