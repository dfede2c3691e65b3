"""Word correction by nearest dictionary entry under edit distance."""

from __future__ import annotations

from collections.abc import Sequence


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between ``a`` and ``b``."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def autocorrect_text(text: str, dictionary: Sequence[str]) -> list[str]:
    """Replace each whitespace-separated word with its closest dictionary word.

    Only dictionary words whose length differs by at most two are considered;
    on a tie the earliest dictionary word wins. A word with no candidate is
    kept as it is.
    """
    corrected = []
    for word in text.split():
        best = word
        min_dist = None
        for candidate in dictionary:
            if abs(len(candidate) - len(word)) > 2:
                continue
            dist = edit_distance(word, candidate)
            if min_dist is None or dist < min_dist:
                min_dist = dist
                best = candidate
        corrected.append(best)
    return corrected