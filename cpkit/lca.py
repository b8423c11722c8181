"""Lowest common ancestors in a tree by binary lifting."""

from __future__ import annotations


class BinaryLiftingLCA:
    """Ancestor jumps, lowest common ancestors and distances in a tree."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.levels = max(1, n.bit_length())
        self.up: list[list[int | None]] = [[None] * self.levels for _ in range(n)]
        self.depth = [0] * n
        self.adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected tree edge."""
        for node in (u, v):
            if not 0 <= node < self.n:
                raise IndexError(f"node {node} out of range for {self.n} nodes")
        self.adj[u].append(v)
        self.adj[v].append(u)

    def preprocess(self, root: int = 0) -> None:
        """Root the tree at ``root`` and fill the jump table."""
        if not 0 <= root < self.n:
            raise IndexError(f"node {root} out of range for {self.n} nodes")
        self.depth[root] = 0
        stack: list[tuple[int, int | None]] = [(root, None)]
        while stack:
            node, parent = stack.pop()
            jumps = self.up[node]
            jumps[0] = parent
            for i in range(1, self.levels):
                mid = jumps[i - 1]
                jumps[i] = None if mid is None else self.up[mid][i - 1]
            for child in self.adj[node]:
                if child != parent:
                    self.depth[child] = self.depth[node] + 1
                    stack.append((child, node))

    def lift(self, v: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``v``, or None past the root."""
        result: int | None = v
        for i in range(self.levels):
            if (k >> i) & 1:
                result = self.up[result][i]
            if result is None:
                break
        return result

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self.lift(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        for i in reversed(range(self.levels)):
            up_u, up_v = self.up[u][i], self.up[v][i]
            if up_u is not None and up_u != up_v:
                u, v = up_u, up_v
        return self.up[u][0]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]