"""Sparse table answering range-minimum queries in constant time."""

from __future__ import annotations

from collections.abc import Iterable


class SparseTable:
    """Static range minimum over a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        n = len(values)
        if n == 0:
            raise ValueError("values must not be empty")
        self.n = n
        self.log_table = [0] * (n + 1)
        for i in range(2, n + 1):
            self.log_table[i] = self.log_table[i // 2] + 1
        self.table = [values]
        level = 1
        while (1 << level) <= n:
            previous = self.table[-1]
            half = 1 << (level - 1)
            self.table.append(
                [min(previous[j], previous[j + half]) for j in range(n - (1 << level) + 1)]
            )
            level += 1

    def query(self, left: int, right: int) -> int:
        """Minimum of positions ``left..right`` inclusive."""
        if not 0 <= left <= right < self.n:
            raise IndexError(f"invalid range [{left}, {right}] for {self.n} values")
        level = self.log_table[right - left + 1]
        row = self.table[level]
        return min(row[left], row[right - (1 << level) + 1])