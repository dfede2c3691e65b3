"""String-to-string map stored in a fixed-size hash table."""

from __future__ import annotations

from collections.abc import Sequence

from .hashtable import CollisionType, HashTable


class HashMap(HashTable):
    """String map using chaining, linear probing or double hashing."""

    def __init__(self, collision_type: CollisionType, params: Sequence[int]) -> None:
        super().__init__(collision_type, params)

    def _find_entry(self, key: str) -> tuple[str, str] | None:
        if self.collision_type is CollisionType.CHAIN:
            bucket = self._slots[self.get_slot(key)] or []
            return next((entry for entry in bucket if entry[0] == key), None)
        for idx in self._probe(key):
            entry = self._slots[idx]
            if entry is None:
                return None
            if entry[0] == key:
                return entry
        return None

    def insert(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` unless the key is already present.

        Raises RuntimeError if an open-addressing table is full.
        """
        if self._find_entry(key) is not None:
            return
        if self._is_full():
            raise RuntimeError("HashMap table full")

        entry = (key, value)
        if self.collision_type is CollisionType.CHAIN:
            slot = self.get_slot(key)
            if self._slots[slot] is None:
                self._slots[slot] = [entry]
            else:
                self._slots[slot].append(entry)
            self._size += 1
            return

        for idx in self._probe(key):
            if self._slots[idx] is None:
                self._slots[idx] = entry
                self._size += 1
                return

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        entry = self._find_entry(key)
        return None if entry is None else entry[1]

    def __str__(self) -> str:
        def pair(entry):
            return f"({entry[0]} , {entry[1]})"

        def render(slot):
            if slot is None:
                return "<EMPTY>"
            if isinstance(slot, list):
                return " ; ".join(pair(entry) for entry in slot)
            return pair(slot)

        return " | ".join(render(slot) for slot in self._slots)