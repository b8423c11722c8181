"""Sum segment trees with point assignment or lazy range addition."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Range sums over ``n`` positions with point assignment."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("size must be positive")
        self.n = n
        self.tree = [0] * (4 * n)

    def build(self, values: Iterable[int]) -> None:
        """Load exactly ``n`` initial values."""
        values = list(values)
        if len(values) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(values)}")
        self._build(values, 1, 0, self.n - 1)

    def _build(self, values: list, node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = values[start]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node, start, mid)
        self._build(values, 2 * node + 1, mid + 1, end)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def update(self, idx: int, val: int) -> None:
        """Set position ``idx`` to ``val``."""
        if not 0 <= idx < self.n:
            raise IndexError(f"index {idx} out of range for {self.n} positions")
        self._update(1, 0, self.n - 1, idx, val)

    def _update(self, node: int, start: int, end: int, idx: int, val: int) -> None:
        if start == end:
            self.tree[node] = val
            return
        mid = (start + end) // 2
        if idx <= mid:
            self._update(2 * node, start, mid, idx, val)
        else:
            self._update(2 * node + 1, mid + 1, end, idx, val)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r`` inclusive."""
        return self._query(1, 0, self.n - 1, l, r)

    def _query(self, node: int, start: int, end: int, l: int, r: int) -> int:
        if r < start or end < l:
            return 0
        if l <= start and end <= r:
            return self.tree[node]
        mid = (start + end) // 2
        return self._query(2 * node, start, mid, l, r) + self._query(2 * node + 1, mid + 1, end, l, r)


class LazySegmentTree:
    """Range sums over ``n`` positions with lazy range addition."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("size must be positive")
        self.n = n
        self.tree = [0] * (4 * n)
        self.lazy = [0] * (4 * n)

    def build(self, values: Iterable[int]) -> None:
        """Load exactly ``n`` initial values."""
        values = list(values)
        if len(values) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(values)}")
        self._build(values, 1, 0, self.n - 1)

    def _build(self, values: list, node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = values[start]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node, start, mid)
        self._build(values, 2 * node + 1, mid + 1, end)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _push(self, node: int, start: int, end: int) -> None:
        pending = self.lazy[node]
        if pending:
            self.tree[node] += (end - start + 1) * pending
            if start != end:
                self.lazy[2 * node] += pending
                self.lazy[2 * node + 1] += pending
            self.lazy[node] = 0

    def update_range(self, l: int, r: int, val: int) -> None:
        """Add ``val`` to every position in ``l..r`` inclusive."""
        self._update_range(1, 0, self.n - 1, l, r, val)

    def _update_range(self, node: int, start: int, end: int, l: int, r: int, val: int) -> None:
        self._push(node, start, end)
        if r < start or end < l:
            return
        if l <= start and end <= r:
            self.lazy[node] += val
            self._push(node, start, end)
            return
        mid = (start + end) // 2
        self._update_range(2 * node, start, mid, l, r, val)
        self._update_range(2 * node + 1, mid + 1, end, l, r, val)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r`` inclusive."""
        return self._query(1, 0, self.n - 1, l, r)

    def _query(self, node: int, start: int, end: int, l: int, r: int) -> int:
        self._push(node, start, end)
        if r < start or end < l:
            return 0
        if l <= start and end <= r:
            return self.tree[node]
        mid = (start + end) // 2
        return self._query(2 * node, start, mid, l, r) + self._query(2 * node + 1, mid + 1, end, l, r)