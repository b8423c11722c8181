# cpkit

Building blocks for competitive programming, in plain Python with no
dependencies beyond the standard library.

## Contents

- `cpkit.number_theory`: `big_pow`, `mod_inverse`, `FactorialTable` (with
  `n_cr`), `derangements`, `log_factorials`, `phi`, `prime_factors`, `sieve`,
  `count_coprime`, `miller_test` and a deterministic Miller–Rabin `is_prime`.
  The default modulus is `MOD = 1_000_000_007`.
- `cpkit.matrix`: `Matrix` with `*`, `Matrix.identity` and `power`.
- `cpkit.sequences`: `lcs_length`, `lis_length`, `next_greater`,
  `previous_greater`, `next_smaller_index`, `previous_smaller_index`,
  `compute_lps` and `kmp_search`.
- `cpkit.graphs`: `bfs`, `dfs`, `bfs_distances`, `bellman_ford`, `dijkstra`,
  `floyd_warshall`, `kruskal`, `prims`, `bipartition`, `kosaraju` and
  `topological_sort`. Weighted graphs are adjacency lists of
  `(neighbour, weight)` pairs; unreachable distances are `math.inf`.
- `cpkit.dsu`: `DSU` (path compression, union by size) and `RollbackDSU`
  (undo the latest union with `rollback`).
- `cpkit.fenwick`: `FenwickTree` and `FenwickTree2D`, indexed from 1.
- `cpkit.segment_tree`: `SegmentTree` (point assignment, range sum) and
  `LazySegmentTree` (range add via `update_range`, range sum).
- `cpkit.sparse_table`: `SparseTable` for O(1) range-minimum queries.
- `cpkit.lca`: `BinaryLiftingLCA` with `add_edge`, `preprocess`, `lift`,
  `lca` and `distance`.
- `cpkit.mo`: `MoAlgorithm` and `MoWithUpdates` for offline range queries.
  By default they answer range sums; subclass and override `add` and
  `remove` for other window statistics.
- `cpkit.trie`: `Trie` with `insert`, `search` and `starts_with`, over strings
  of any characters.
- `cpkit.debug`: readable dumps of nested containers, grids, adjacency lists
  and array-backed trees (`format_value`, `format_grid`, `format_graph`,
  `format_segment_tree`), and writers that send them to stderr or a given
  stream under a `DBG[line]: name = ...` header (`dbg`, `dbg_row`,
  `dbg_graph`, `dbg_segment_tree`, `dbg_line`). The writers print nothing
  when the `ONLINE_JUDGE` environment variable is set.

## Example

```python
from cpkit.number_theory import FactorialTable, is_prime
from cpkit.graphs import dijkstra
from cpkit.segment_tree import SegmentTree

table = FactorialTable(10, 1_000_000_007)
print(table.n_cr(10, 3))          # 120
print(is_prime(1_000_000_007))    # True

graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
print(dijkstra(graph, 0))         # [0, 3, 1]

tree = SegmentTree(5)
tree.build([1, 2, 3, 4, 5])
tree.update(2, 10)
print(tree.query(1, 3))           # 16
```

## Command

Installing the package provides a `cpkit` command that runs the solution in
`cpkit.runner.solve` once per test case:

```
cpkit
cpkit --read-cases < input.txt
```

Without options it runs a single case. With `-t` / `--read-cases` it reads the
number of cases from the first token of standard input. `cpkit.runner.run_cases`
does the same from Python, collecting what each call returns.

## Limitations

The bundled `solve` is a stand-in that prints `5`; it reads no input. The
command is a harness for your own solution, not a solver of any particular
problem.

## Tests

```
pip install -e ".[test]"
pytest
```