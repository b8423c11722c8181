import math
import random

import pytest

from cpkit.graphs import (
    bellman_ford,
    bfs,
    bfs_distances,
    bipartition,
    dfs,
    dijkstra,
    floyd_warshall,
    kosaraju,
    kruskal,
    prims,
    topological_sort,
)


def random_digraph(rng, n, edges):
    graph = [[] for _ in range(n)]
    for _ in range(edges):
        graph[rng.randrange(n)].append(rng.randrange(n))
    return graph


def random_weighted(rng, n, edges, low=0, high=20):
    graph = [[] for _ in range(n)]
    for _ in range(edges):
        graph[rng.randrange(n)].append((rng.randrange(n), rng.randint(low, high)))
    return graph


def connected_undirected(rng, n, extra):
    graph = [[] for _ in range(n)]

    def link(u, v, w):
        graph[u].append((v, w))
        graph[v].append((u, w))

    for v in range(1, n):
        link(rng.randrange(v), v, rng.randint(1, 30))
    for _ in range(extra):
        link(rng.randrange(n), rng.randrange(n), rng.randint(1, 30))
    return graph


def to_matrix(graph):
    n = len(graph)
    matrix = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for u, edges in enumerate(graph):
        for v, w in edges:
            matrix[u][v] = min(matrix[u][v], w)
    return matrix


@pytest.mark.parametrize("seed", range(5))
def test_bfs_and_dfs_reach_the_same_nodes(seed):
    rng = random.Random(seed)
    graph = random_digraph(rng, 15, 25)
    order = bfs(graph, 0)
    dist = bfs_distances(graph, 0)
    assert order[0] == 0
    assert set(order) == {v for v in range(15) if dist[v] != math.inf}
    assert len(order) == len(set(order))
    assert [dist[v] for v in order] == sorted(dist[v] for v in order)
    depth_first = dfs(graph, 0)
    assert depth_first[0] == 0
    assert set(depth_first) == set(order)


@pytest.mark.parametrize("seed", range(5))
def test_bfs_distances_respect_edges(seed):
    rng = random.Random(seed)
    graph = random_digraph(rng, 12, 20)
    dist = bfs_distances(graph, 3)
    assert dist[3] == 0
    for u, edges in enumerate(graph):
        for v in edges:
            if dist[u] != math.inf:
                assert dist[v] <= dist[u] + 1


def test_start_out_of_range():
    with pytest.raises(IndexError):
        bfs([[1], [0]], 2)
    with pytest.raises(IndexError):
        dijkstra([[]], -1)


@pytest.mark.parametrize("seed", range(5))
def test_shortest_paths_agree(seed):
    rng = random.Random(seed)
    graph = random_weighted(rng, 10, 30)
    all_pairs = floyd_warshall(to_matrix(graph))
    for source in range(10):
        expected = all_pairs[source]
        assert dijkstra(graph, source) == expected
        assert bellman_ford(graph, source) == expected


@pytest.mark.parametrize("seed", range(5))
def test_bellman_ford_negative_weights_on_dag(seed):
    rng = random.Random(seed)
    n = 9
    graph = [[] for _ in range(n)]
    for _ in range(20):
        u, v = sorted(rng.sample(range(n), 2))
        graph[u].append((v, rng.randint(-5, 5)))
    all_pairs = floyd_warshall(to_matrix(graph))
    assert bellman_ford(graph, 0) == all_pairs[0]


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_spanning_tree_of_a_tree_uses_every_edge():
    graph = [[] for _ in range(4)]
    tree = [(0, 1, 4), (1, 2, 7), (1, 3, 2)]
    for u, v, w in tree:
        graph[u].append((v, w))
        graph[v].append((u, w))
    total = sum(w for _, _, w in tree)
    assert kruskal(graph) == total
    assert prims(graph) == total


@pytest.mark.parametrize("seed", range(6))
def test_kruskal_and_prims_agree(seed):
    rng = random.Random(seed)
    graph = connected_undirected(rng, 12, 20)
    assert kruskal(graph) == prims(graph)


def test_prims_disconnected_is_infinite():
    graph = [[(1, 3)], [(0, 3)], []]
    assert prims(graph) == math.inf


@pytest.mark.parametrize("seed", range(4))
def test_bipartition_of_tree_splits_every_edge(seed):
    rng = random.Random(seed)
    n = 15
    graph = [[] for _ in range(n)]
    for v in range(1, n):
        u = rng.randrange(v)
        graph[u].append(v)
        graph[v].append(u)
    side_a, side_b = bipartition(graph, 0)
    assert side_a[0] == 0
    assert sorted(side_a + side_b) == list(range(n))
    a = set(side_a)
    for u, edges in enumerate(graph):
        for v in edges:
            assert (u in a) != (v in a)


def test_bipartition_of_path():
    graph = [[1], [0, 2], [1, 3], [2]]
    assert bipartition(graph, 0) == ([0, 2], [1, 3])


def test_kosaraju_cycle_and_tail():
    graph = [[1], [2], [0, 3], []]
    components = kosaraju(graph)
    assert sorted(sorted(c) for c in components) == [[0, 1, 2], [3]]


@pytest.mark.parametrize("seed", range(5))
def test_kosaraju_components_are_strongly_connected(seed):
    rng = random.Random(seed)
    graph = random_digraph(rng, 12, 22)
    components = kosaraju(graph)
    assert sorted(v for c in components for v in c) == list(range(12))
    reach = [set(bfs(graph, v)) for v in range(12)]
    for component in components:
        for u in component:
            for v in range(12):
                mutual = v in reach[u] and u in reach[v]
                assert mutual == (v in component)


@pytest.mark.parametrize("seed", range(5))
def test_topological_sort_orders_edges_forward(seed):
    rng = random.Random(seed)
    n = 12
    labels = list(range(n))
    rng.shuffle(labels)
    graph = [[] for _ in range(n)]
    for _ in range(25):
        i, j = sorted(rng.sample(range(n), 2))
        graph[labels[i]].append(labels[j])
    order = topological_sort(graph)
    assert sorted(order) == list(range(n))
    position = {v: i for i, v in enumerate(order)}
    for u, edges in enumerate(graph):
        for v in edges:
            assert position[u] < position[v]