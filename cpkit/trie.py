"""Prefix tree over strings."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_end = False


class Trie:
    """Set of words supporting exact and prefix lookup."""

    def __init__(self) -> None:
        self.root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def _walk(self, text: str) -> _Node | None:
        node = self.root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None