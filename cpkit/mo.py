"""Offline range queries by Mo's ordering, optionally with point updates.

The default ``add`` and ``remove`` maintain the sum of the current window;
override them in a subclass for other window statistics.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    left: int
    right: int
    idx: int
    time: int = 0


@dataclass
class _Update:
    pos: int
    value: int


class MoAlgorithm:
    """Answers inclusive range queries over a fixed array in Mo's order."""

    def __init__(self, values: Iterable[int], block_size: int = 450) -> None:
        if block_size < 1:
            raise ValueError("block size must be positive")
        self.values = list(values)
        self.block_size = block_size
        self.queries: list[Query] = []
        self.answers: list[int] = []
        self.cur_left = 0
        self.cur_right = -1
        self.cur_answer = 0

    def add_query(self, left: int, right: int, idx: int | None = None) -> None:
        """Queue the range ``left..right``; its answer goes to slot ``idx``."""
        if not 0 <= left <= right < len(self.values):
            raise IndexError(f"invalid range [{left}, {right}] for {len(self.values)} values")
        if idx is None:
            idx = len(self.queries)
        if idx < 0:
            raise IndexError("query index must be non-negative")
        self.queries.append(Query(left, right, idx))

    def add(self, pos: int) -> None:
        """Bring position ``pos`` into the window."""
        self.cur_answer += self.values[pos]

    def remove(self, pos: int) -> None:
        """Take position ``pos`` out of the window."""
        self.cur_answer -= self.values[pos]

    def _key(self, query: Query) -> tuple[int, int]:
        block = query.left // self.block_size
        return block, query.right if block % 2 else -query.right

    def _move_window(self, query: Query) -> None:
        while self.cur_left > query.left:
            self.cur_left -= 1
            self.add(self.cur_left)
        while self.cur_right < query.right:
            self.cur_right += 1
            self.add(self.cur_right)
        while self.cur_left < query.left:
            self.remove(self.cur_left)
            self.cur_left += 1
        while self.cur_right > query.right:
            self.remove(self.cur_right)
            self.cur_right -= 1

    def process(self) -> list[int]:
        """Answer every queued query; answers are indexed by query index."""
        self.queries.sort(key=self._key)
        self.answers = [0] * (max((q.idx for q in self.queries), default=-1) + 1)
        for query in self.queries:
            self._move_window(query)
            self.answers[query.idx] = self.cur_answer
        return self.answers


class MoWithUpdates(MoAlgorithm):
    """Mo's ordering over time as well, for queries interleaved with updates.

    A query sees every update added before it and none added after.
    """

    def __init__(self, values: Iterable[int], block_size: int = 320) -> None:
        super().__init__(values, block_size)
        self.updates: list[_Update] = []
        self.cur_time = 0

    def add_query(self, left: int, right: int, idx: int | None = None) -> None:
        """Queue the range ``left..right`` at the current point in time."""
        if not 0 <= left <= right < len(self.values):
            raise IndexError(f"invalid range [{left}, {right}] for {len(self.values)} values")
        if idx is None:
            idx = len(self.queries)
        if idx < 0:
            raise IndexError("query index must be non-negative")
        self.queries.append(Query(left, right, idx, len(self.updates)))

    def add_update(self, pos: int, val: int) -> None:
        """Set position ``pos`` to ``val`` for every later query."""
        if not 0 <= pos < len(self.values):
            raise IndexError(f"position {pos} out of range for {len(self.values)} values")
        while self.cur_time < len(self.updates):
            self._toggle(self.cur_time)
            self.cur_time += 1
        self.updates.append(_Update(pos, val))
        self._toggle(self.cur_time)
        self.cur_time += 1

    def add(self, pos: int) -> None:
        """Bring position ``pos`` into the window."""
        self.cur_answer += self.values[pos]

    def remove(self, pos: int) -> None:
        """Take position ``pos`` out of the window."""
        self.cur_answer -= self.values[pos]

    def _toggle(self, t: int) -> None:
        """Swap update ``t`` in or out of the array, keeping the window consistent."""
        update = self.updates[t]
        pos = update.pos
        inside = self.cur_left <= pos <= self.cur_right
        if inside:
            self.remove(pos)
        self.values[pos], update.value = update.value, self.values[pos]
        if inside:
            self.add(pos)

    def _key(self, query: Query) -> tuple[int, int, int]:
        return query.left // self.block_size, query.right // self.block_size, query.time

    def process(self) -> list[int]:
        """Answer every queued query; answers are indexed by query index."""
        self.queries.sort(key=self._key)
        self.answers = [0] * (max((q.idx for q in self.queries), default=-1) + 1)
        for query in self.queries:
            while self.cur_time < query.time:
                self._toggle(self.cur_time)
                self.cur_time += 1
            while self.cur_time > query.time:
                self.cur_time -= 1
                self._toggle(self.cur_time)
            self._move_window(query)
            self.answers[query.idx] = self.cur_answer
        return self.answers