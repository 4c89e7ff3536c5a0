# clrsalgo

Classic textbook algorithms and data structures in plain Python, with no
dependencies outside the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `clrsalgo.common` | `INFINITE`, `NINFINITE`, `NILVALUE`; saturating `inf_add` / `inf_sub`; `format_array`; `PrependList` |
| `clrsalgo.adjmat` | `AdjMatrix`, `make_adjmat`, `read_adjmat` |
| `clrsalgo.adjlist` | `AdjacencyList`, `Edge`, `Color`, `EdgeType`, `read_adjlist`, `read_weighted_adjlist` |
| `clrsalgo.all_pairs` | `extend_shortest_paths`, `slow_all_pairs_shortest_paths`, `faster_all_pairs_shortest_paths`, `floyd_warshall` |
| `clrsalgo.bfs` | `bfs`, `calc_path`, `format_path` |
| `clrsalgo.dfs` | `dfs` (discovery/finish times and edge classification), `DFSResult`, `edge_type_name` |
| `clrsalgo.ford_fulkerson` | maximum flow with Edmonds–Karp path search: `ford_fulkerson` and its steps |
| `clrsalgo.disjoint_set` | disjoint-set forest (`ForestNode`, `forest_make_set`, `forest_find_set`, `forest_link`, `forest_union`) and linked-list sets (`ListSetNode`, `ListSet`, `list_make_set`, `list_find_set`, `list_union`) |
| `clrsalgo.fib_heap` | `FibonacciHeap`, `FibNode`, `fib_heap_construct` |
| `clrsalgo.binomial_heap` | `BinomialHeap`, `BinomialNode`, `read_binomial_heap` |
| `clrsalgo.bst` | `BinarySearchTree`, `BSTNode`, `randomize_in_place` |
| `clrsalgo.sorting` | `heap_sort`, `bucket_sort`, `counting_sort`, `partition`, `quick_sort` |
| `clrsalgo.hashing` | `ChainedHashTable`, `DirectAddressTable` |
| `clrsalgo.shuffle` | in-place perfect in-shuffle: `in_perfect_shuffle` and its helpers |
| `clrsalgo.activity` | `Activity`, `read_activities`, `compatible_sets`, `dp_activity_selector`, `activity_solutions`, `greedy_activity_select` |
| `clrsalgo.knapsack` | `knapsack_table`, `select_items`, `knapsack` |
| `clrsalgo.alignment` | `gene_score`, `similarity` |

Distances use `INFINITE` (2**31 - 1) for "unreachable"; `inf_add` keeps it
from overflowing into a real value. Parent arrays use `NILVALUE` (-1) for
"no predecessor".

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

All-pairs shortest paths. `read_adjmat` reads a vertex count followed by
`src dst weight` triples:

```python
import io
from clrsalgo.adjmat import read_adjmat
from clrsalgo.all_pairs import floyd_warshall

w = read_adjmat(io.StringIO("3\n0 1 4\n1 2 1\n0 2 10\n"))
print(floyd_warshall(w).format())
```

Breadth-first search returns distances and parents; `calc_path` turns the
parents into a path, or `None` when there is none:

```python
from clrsalgo.adjlist import AdjacencyList
from clrsalgo.bfs import bfs, calc_path

g = AdjacencyList(4)
g.insert(0, 1)
g.insert(1, 2)
g.insert(2, 3)
distance, parent = bfs(g, 0)
print(distance)                  # [0, 1, 2, 3]
print(calc_path(parent, 0, 3))   # [0, 1, 2, 3]
```

Note that `AdjacencyList.insert` places a new edge right after the head of
the vertex's list, while `insert_weighted` places it at the head.

Maximum flow. The graph is not modified; the returned flow matrix is
skew-symmetric:

```python
from clrsalgo.adjlist import AdjacencyList
from clrsalgo.adjmat import make_adjmat
from clrsalgo.ford_fulkerson import ford_fulkerson

g = AdjacencyList(3)
g.insert(0, 1)
g.insert(1, 2)
capacity = make_adjmat(3, 0, 0)
capacity.mat[0][1] = 5
capacity.mat[1][2] = 3
flow = ford_fulkerson(g, 0, 2, capacity)
print(flow.mat[0][1])  # 3
```

Heaps:

```python
from clrsalgo.fib_heap import fib_heap_construct
from clrsalgo.binomial_heap import BinomialHeap, BinomialNode

heap = fib_heap_construct([7, 3, 9, 1])
print(heap.extract_min().key)  # 1

bh = BinomialHeap()
for key in (5, 2, 8):
    bh.insert(BinomialNode(key))
print(bh.minimum().key)  # 2
```

Sorting and hashing:

```python
from clrsalgo.sorting import counting_sort, bucket_sort
from clrsalgo.hashing import ChainedHashTable

print(counting_sort([2, 5, 3, 0, 2, 3, 0, 3], 10))  # [0, 0, 2, 2, 3, 3, 3, 5]
print(bucket_sort([78, 17, 39, 26, 72, 94, 21, 12, 23, 68]))

table = ChainedHashTable(10)
table.insert(17)
print(table.search(17))  # True
table.delete(17)
```

`bucket_sort` needs every one of its n values in `[0, n*n)`; `counting_sort`
needs every value in `[0, k)`. Both raise `ValueError` otherwise.

Dynamic programming:

```python
from clrsalgo.knapsack import knapsack
from clrsalgo.alignment import similarity

print(knapsack([1, 3, 4], [15, 20, 30], 4))  # best value and chosen item indices
print(similarity("AGTGATG", "GTTAG"))
```

## Command-line tools

```
clrsalgo-shuffle [n]      # perfect in-shuffle of 1..n for an even n (n read from stdin if omitted)
clrsalgo-knapsack         # solve the built-in 0/1 knapsack example and print the table
clrsalgo-align [file]     # read "count" then "len1 seq1 len2 seq2" cases; print each score
```

`clrsalgo-align` reads from the named file, or from standard input when no
file is given.

## Not included

The package has no single-source shortest-path algorithms (Dijkstra,
Bellman–Ford, shortest paths in DAGs), no topological sort, no Huffman
coding, and no standalone queue, stack or priority-queue modules.