"""Supply of table sizes taken from a fixed list of primes."""

from __future__ import annotations

from collections.abc import Iterable


class PrimeGenerator:
    """Hands out sizes from the end of the given list, one at a time."""

    def __init__(self, primes: Iterable[int]) -> None:
        self._sizes = list(primes)

    def next_size(self) -> int:
        """Remove and return the last remaining size."""
        if not self._sizes:
            raise IndexError("No more primes available")
        return self._sizes.pop()