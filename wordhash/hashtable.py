"""Common machinery for the string hash tables: hashing, probing and load."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum
from functools import reduce


class CollisionType(Enum):
    """Strategy used when two keys land in the same slot."""

    CHAIN = "chain"
    LINEAR = "linear"
    DOUBLE = "double"


def letter_number(c: str) -> int:
    """Map 'a'..'z' to 0..25 and 'A'..'Z' to 26..51."""
    if c.islower():
        return ord(c) - ord("a")
    return ord(c) - ord("A") + 26


def polynomial_hash(key: str, z: int, p: int) -> int:
    """Polynomial rolling hash of ``key`` with base ``z`` modulo ``p``."""
    return reduce(lambda h, c: (h * z + letter_number(c)) % p, key, 0)


class HashTable:
    """Fixed-size table of slots addressed by a polynomial string hash.

    ``params[0]`` is the base of the primary hash and ``params[-1]`` the table
    size. Double hashing also uses ``params[1]`` as the base and ``params[2]``
    as the modulus of the secondary hash.
    """

    def __init__(self, collision_type: CollisionType, params: Sequence[int]) -> None:
        if not params:
            raise ValueError("params must not be empty")
        if params[-1] <= 0:
            raise ValueError("table size must be positive")
        self.collision_type = CollisionType(collision_type)
        self.params = list(params)
        self.table_size = self.params[-1]
        self._size = 0
        self._slots: list = [None] * self.table_size

    def get_slot(self, key: str) -> int:
        """Return the home slot of ``key``."""
        return polynomial_hash(key, self.params[0], self.table_size)

    def load_factor(self) -> float:
        """Return the ratio of stored items to table size."""
        return self._size / self.table_size

    def __len__(self) -> int:
        return self._size

    def _double_hash(self, key: str) -> int:
        modulus = self.params[2]
        return modulus - polynomial_hash(key, self.params[1], modulus)

    def _probe(self, key: str) -> Iterator[int]:
        """Yield the slots examined for ``key``, home slot first."""
        start = self.get_slot(key)
        yield start
        if self.collision_type is CollisionType.CHAIN:
            return
        step = 1 if self.collision_type is CollisionType.LINEAR else self._double_hash(key)
        for i in range(1, self.table_size):
            yield (start + i * step) % self.table_size

    def _is_full(self) -> bool:
        return self.collision_type is not CollisionType.CHAIN and self._size == self.table_size