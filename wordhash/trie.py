"""Prefix tree for word storage and autocompletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    is_end: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


class Trie:
    """Stores words and lists completions of a prefix in alphabetical order."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for c in word:
            node = node.children.setdefault(c, _Node())
        node.is_end = True

    def _node_for(self, prefix: str) -> _Node | None:
        node = self._root
        for c in prefix:
            node = node.children.get(c)
            if node is None:
                return None
        return node

    def suggestions(self, prefix: str) -> list[str]:
        """Return every stored word starting with ``prefix``, alphabetically."""
        node = self._node_for(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def _walk(self, node: _Node, current: str) -> Iterator[str]:
        if node.is_end:
            yield current
        for c in sorted(node.children):
            yield from self._walk(node.children[c], current + c)