"""A prefix tree over lower-case English words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


def _check(word: str) -> None:
    bad = [ch for ch in word if not "a" <= ch <= "z"]
    if bad:
        raise ValueError(f"only the letters a-z are allowed, got {bad[0]!r}")


class Trie:
    """Set of words over ``a``-``z`` supporting whole-word lookup."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        _check(word)
        if not word:
            return
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, key: str) -> bool:
        """True if ``key`` was inserted as a whole word; the empty key always matches."""
        _check(key)
        node = self._root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node is self._root or node.is_end

    def __contains__(self, key: str) -> bool:
        return self.search(key)