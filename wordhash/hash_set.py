"""Set of strings stored in a fixed-size hash table."""

from __future__ import annotations

from collections.abc import Sequence

from .hashtable import CollisionType, HashTable


class HashSet(HashTable):
    """String set using chaining, linear probing or double hashing."""

    def __init__(self, collision_type: CollisionType, params: Sequence[int]) -> None:
        super().__init__(collision_type, params)

    def insert(self, key: str) -> None:
        """Add ``key``; raise RuntimeError if an open-addressing table is full."""
        if key in self:
            return
        if self._is_full():
            raise RuntimeError("HashSet table full")

        if self.collision_type is CollisionType.CHAIN:
            slot = self.get_slot(key)
            if self._slots[slot] is None:
                self._slots[slot] = [key]
            else:
                self._slots[slot].append(key)
            self._size += 1
            return

        for idx in self._probe(key):
            if self._slots[idx] is None:
                self._slots[idx] = key
                self._size += 1
                return

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        if self.collision_type is CollisionType.CHAIN:
            bucket = self._slots[self.get_slot(key)]
            return bucket is not None and key in bucket
        for idx in self._probe(key):
            entry = self._slots[idx]
            if entry is None:
                return False
            if entry == key:
                return True
        return False

    def __str__(self) -> str:
        def render(entry):
            if entry is None:
                return "<EMPTY>"
            if isinstance(entry, list):
                return " ; ".join(entry)
            return entry

        return " | ".join(render(entry) for entry in self._slots)