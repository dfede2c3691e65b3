"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations


def build_lps(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> bool:
    """Return True if ``pattern`` occurs in ``text``; an empty pattern never matches."""
    if not pattern:
        return False
    lps = build_lps(pattern)
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                return True
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return False