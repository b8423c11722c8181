"""Graph traversals, shortest paths, spanning trees and orderings.

Unweighted graphs are adjacency lists of node indices; weighted graphs are
adjacency lists of ``(neighbour, weight)`` pairs. Unreachable distances are
``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

from .dsu import DSU

INF = math.inf


def _check_node(graph: Sequence, node: int) -> None:
    if not 0 <= node < len(graph):
        raise IndexError(f"node {node} out of range for {len(graph)} nodes")


def _explore(graph, start, visited, preorder=None, postorder=None) -> None:
    """Depth-first search from ``start`` recording pre- and post-order."""
    visited[start] = True
    if preorder is not None:
        preorder.append(start)
    stack = [(start, iter(graph[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not visited[nxt]:
                visited[nxt] = True
                if preorder is not None:
                    preorder.append(nxt)
                stack.append((nxt, iter(graph[nxt])))
                break
        else:
            stack.pop()
            if postorder is not None:
                postorder.append(node)


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes reachable from ``start`` in breadth-first order."""
    _check_node(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in graph[node]:
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes reachable from ``start`` in depth-first preorder."""
    _check_node(graph, start)
    order: list[int] = []
    _explore(graph, start, [False] * len(graph), preorder=order)
    return order


def bfs_distances(graph: Sequence[Sequence[int]], start: int) -> list[float]:
    """Edge counts of shortest paths from ``start``."""
    _check_node(graph, start)
    dist: list[float] = [INF] * len(graph)
    dist[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if dist[nxt] == INF:
                dist[nxt] = dist[node] + 1
                queue.append(nxt)
    return dist


def bellman_ford(graph, source: int) -> list[float]:
    """Shortest distances from ``source``; negative edge weights are allowed."""
    _check_node(graph, source)
    dist: list[float] = [INF] * len(graph)
    dist[source] = 0
    for _ in range(len(graph) - 1):
        for node, edges in enumerate(graph):
            for nxt, weight in edges:
                if dist[node] + weight < dist[nxt]:
                    dist[nxt] = dist[node] + weight
    return dist


def dijkstra(graph, source: int) -> list[float]:
    """Shortest distances from ``source`` for non-negative edge weights."""
    _check_node(graph, source)
    dist: list[float] = [INF] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, weight in graph[node]:
            if dist[node] + weight < dist[nxt]:
                dist[nxt] = dist[node] + weight
                heapq.heappush(heap, (dist[nxt], nxt))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("weight matrix must be square")
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j in range(n):
                if via + through[j] < row[j]:
                    row[j] = via + through[j]
    return dist


def kruskal(graph) -> float:
    """Total weight of a minimum spanning forest, treating edges as undirected."""
    edges = sorted((weight, u, v) for u, neighbours in enumerate(graph) for v, weight in neighbours)
    sets = DSU(len(graph))
    return sum(weight for weight, u, v in edges if sets.unite(u, v))


def prims(graph) -> float:
    """Total weight of a minimum spanning tree grown from node 0.

    Nodes that cannot be reached from node 0 make the total infinite.
    """
    n = len(graph)
    if n == 0:
        return 0
    dist: list[float] = [INF] * n
    visited = [False] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        _, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        for nxt, weight in graph[node]:
            if not visited[nxt] and weight < dist[nxt]:
                dist[nxt] = weight
                heapq.heappush(heap, (weight, nxt))
    return sum(dist)


def bipartition(graph: Sequence[Sequence[int]], start: int) -> tuple[list[int], list[int]]:
    """Two-colour the nodes reachable from ``start`` by depth-first search.

    Returns the side holding ``start`` and the other side, each in visit order.
    """
    _check_node(graph, start)
    color: list[int | None] = [None] * len(graph)
    color[start] = 1
    sides: dict[int, list[int]] = {1: [start], 0: []}
    stack = [(start, iter(graph[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if color[nxt] is None:
                color[nxt] = 1 - color[node]
                sides[color[nxt]].append(nxt)
                stack.append((nxt, iter(graph[nxt])))
                break
        else:
            stack.pop()
    return sides[1], sides[0]


def kosaraju(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Strongly connected components of a directed graph."""
    n = len(graph)
    visited = [False] * n
    finished: list[int] = []
    for node in range(n):
        if not visited[node]:
            _explore(graph, node, visited, postorder=finished)
    reverse: list[list[int]] = [[] for _ in range(n)]
    for node, neighbours in enumerate(graph):
        for nxt in neighbours:
            reverse[nxt].append(node)
    seen = [False] * n
    components = []
    for node in reversed(finished):
        if not seen[node]:
            component: list[int] = []
            _explore(reverse, node, seen, preorder=component)
            components.append(component)
    return components


def topological_sort(graph: Sequence[Sequence[int]]) -> list[int]:
    """Nodes of a directed acyclic graph so that every edge points forward."""
    visited = [False] * len(graph)
    finished: list[int] = []
    for node in range(len(graph)):
        if not visited[node]:
            _explore(graph, node, visited, postorder=finished)
    return finished[::-1]