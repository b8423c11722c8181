"""Disjoint-set union structures, with and without rollback."""

from __future__ import annotations


def _check(n: int, x: int) -> None:
    if not 0 <= x < n:
        raise IndexError(f"element {x} out of range for {n} elements")


class DSU:
    """Union by size with path compression over elements ``0..n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.parent = list(range(n))
        self.size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        _check(self.n, x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self.size[x] < self.size[y]:
            x, y = y, x
        self.parent[y] = x
        self.size[x] += self.size[y]
        return True

    def same(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)


class RollbackDSU:
    """Union by size without path compression, so unions can be undone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.parent = list(range(n))
        self.size = [1] * n
        self.history: list[tuple[int, int]] = []

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        _check(self.n, x)
        while self.parent[x] != x:
            x = self.parent[x]
        return x

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self.size[x] < self.size[y]:
            x, y = y, x
        self.history.append((y, self.size[x]))
        self.parent[y] = x
        self.size[x] += self.size[y]
        return True

    def rollback(self) -> bool:
        """Undo the latest successful union; False if there is none."""
        if not self.history:
            return False
        y, old_size = self.history.pop()
        self.size[self.parent[y]] = old_size
        self.parent[y] = y
        return True

    def same(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)