"""Binary indexed (Fenwick) trees in one and two dimensions, indexed from 1."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums over positions ``1..n`` with point updates."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.tree = [0] * (n + 1)

    def update(self, idx: int, val: int) -> None:
        """Add ``val`` at position ``idx``; positions past ``n`` are ignored."""
        if idx < 1:
            raise IndexError("Fenwick positions start at 1")
        while idx <= self.n:
            self.tree[idx] += val
            idx += idx & -idx

    def range_update(self, l: int, r: int, val: int) -> None:
        """Add ``val`` to every point of ``[l, r]`` when read through :meth:`query`."""
        self.update(l, val)
        self.update(r + 1, -val)

    def query(self, idx: int) -> int:
        """Sum of positions ``1..idx``."""
        if idx > self.n:
            raise IndexError(f"position {idx} exceeds {self.n}")
        total = 0
        while idx > 0:
            total += self.tree[idx]
            idx -= idx & -idx
        return total


class FenwickTree2D:
    """Rectangle sums over an ``n`` x ``m`` grid with point updates."""

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("dimensions must be non-negative")
        self.n = n
        self.m = m
        self.tree = [[0] * (m + 1) for _ in range(n + 1)]

    def update(self, x: int, y: int, val: int) -> None:
        """Add ``val`` at cell ``(x, y)``."""
        if x < 1 or y < 1:
            raise IndexError("Fenwick positions start at 1")
        i = x
        while i <= self.n:
            row = self.tree[i]
            j = y
            while j <= self.m:
                row[j] += val
                j += j & -j
            i += i & -i

    def query(self, x: int, y: int) -> int:
        """Sum of the rectangle ``(1, 1)`` to ``(x, y)``."""
        if x > self.n or y > self.m:
            raise IndexError(f"cell ({x}, {y}) exceeds {self.n}x{self.m}")
        total = 0
        i = x
        while i > 0:
            row = self.tree[i]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with corners ``(x1, y1)`` and ``(x2, y2)``."""
        return (
            self.query(x2, y2)
            - self.query(x1 - 1, y2)
            - self.query(x2, y1 - 1)
            + self.query(x1 - 1, y1 - 1)
        )