# algokit

Classic algorithms and data structures in plain Python, using only the
standard library.

## Contents

| Module | What it offers |
| --- | --- |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `quick_sort`, `counting_sort`, `radix_sort`, `is_sorted`, `random_values` |
| `algokit.heaps` | `MaxHeap` and `MinHeap` with a fixed capacity: `insert`, `peek`, `extract`, `fill_random`, `MaxHeap.heap_sort`, `MinHeap.decrease_key` |
| `algokit.bintree` | `BinaryTree`, a binary search tree keyed by integers, with `TreeNode` and `AVLTree` |
| `algokit.graph` | `Graph`, an adjacency-list graph, directed or undirected, weighted or not, and `Neighbor` |
| `algokit.graph_search` | `GraphSearch` with `bfs`, `path_to`, `dfs`, `classify_edges` and `topological_sort` |
| `algokit.shortest_paths` | `dijkstra` and `bellman_ford`, returning `VertexState` lists; `NegativeCycleError` |
| `algokit.hashing` | `ChainedHashTable` with a choice of `HashMethod`, and `OpenAddressHashTable` |
| `algokit.dp` | `fibonacci`, `making_one`, `power`, `sugar_delivery`, `hanoi_moves`, `justify_lines` |
| `algokit.paths` | grid path problems: `descending_path`, `collect_cheese`, and `Cell` |
| `algokit.optimal_bst` | `optimal_bst`, its `OptimalBSTResult` and the `BSTNode` tree it builds |
| `algokit.matrix` | `Matrix`, `chain_multiply`, `greedy_chain_multiply` |
| `algokit.edit_distance` | `edit_distance` and the `EditDistance` table |
| `algokit.knapsack` | `Item`, `random_items`, `greedy_knapsack` |
| `algokit.fingering` | `optimal_fingering`, `random_notes` and `FingerCost` |

Functions that produce random input (`random_values`, `fill_random`,
`ChainedHashTable`, `Matrix.random`, `random_items`, `random_notes`) accept a
`random.Random` instance, so results can be reproduced with a fixed seed.

## Installation

```
pip install .
```

## Examples

Sorting:

```python
from algokit.sorting import merge_sort, radix_sort, is_sorted

values = merge_sort([5, 3, 9, 1])      # [1, 3, 5, 9]
assert is_sorted(values)
radix_sort([170, 45, 75, 90, 2])       # [2, 45, 75, 90, 170]
```

Heaps:

```python
from algokit.heaps import MaxHeap

heap = MaxHeap(10)
for key in (4, 9, 1):
    heap.insert(key)
heap.heap_sort()   # [1, 4, 9]; the heap itself is left unchanged
heap.extract()     # 9
```

Binary search tree:

```python
from algokit.bintree import BinaryTree

tree = BinaryTree()
tree.add("c", 20)
tree.add("a", 33)
tree.add("k", 12)
tree.delete(20)
list(tree.inorder())   # [("k", 12), ("a", 33)]
```

Graphs and shortest paths:

```python
from algokit.graph import Graph
from algokit.graph_search import GraphSearch
from algokit.shortest_paths import bellman_ford, dijkstra

graph = Graph(3, directed=True, weighted=True)
graph.insert_edge(0, 1, 4)
graph.insert_edge(1, 2, 1)
states = dijkstra(graph, 0)
[s.distance for s in states]   # [0, 4, 5]

search = GraphSearch(4, directed=True, weighted=False)
search.insert_edge(0, 1)
search.insert_edge(1, 2)
search.path_to(0, 2)           # [0, 1, 2]
search.bfs(0).distance         # (0, 1, 2, None)
```

`bellman_ford` accepts negative weights and raises `NegativeCycleError` when
a negative cycle is reachable from the source. An unreachable vertex has a
`distance` and `parent` of `None`.

Hash tables:

```python
from algokit.hashing import ChainedHashTable, HashMethod, OpenAddressHashTable

table = ChainedHashTable(100, HashMethod.UNIVERSAL)
table.insert(42, "answer")
table.search(42)          # "answer"
table.cluster_sizes()     # length of every chain

open_table = OpenAddressHashTable(13)
open_table.insert(7)      # True; inserting 7 again returns False
```

Dynamic programming:

```python
from algokit.dp import fibonacci, hanoi_moves, justify_lines, making_one

fibonacci(6)                     # 8
making_one(10)                   # 3
list(hanoi_moves(1))             # [(1, "A", "B"), (1, "B", "C")]
justify_lines(["This", "is", "array", "for", "text", "justification"], 16)
```

`hanoi_moves` routes every move through the middle peg, so `n` disks take
`3**n - 1` moves.

Other problems:

```python
from algokit.edit_distance import edit_distance
from algokit.knapsack import Item, greedy_knapsack
from algokit.matrix import Matrix, chain_multiply
from algokit.optimal_bst import optimal_bst

edit_distance("MIS", "SID")    # insertions and deletions only
greedy_knapsack([Item(20, 9), Item(15, 3)], 30)   # (9, [Item(size=20, value=9)])
chain_multiply([Matrix([[1, 2]]), Matrix([[3], [4]])])   # Matrix([[11]])
result = optimal_bst("ABCD", [0.1, 0.2, 0.3, 0.4])
root = result.build_tree()
```

## What the package does not do

- There is no command-line program; everything is used as a library.
- `AVLTree` shares `BinaryTree`'s insertion and deletion and does not
  rebalance itself.
- `OpenAddressHashTable` has a fixed number of slots and uses linear probing
  only; it raises `OverflowError` when full rather than growing.
- `greedy_knapsack` and `greedy_chain_multiply` are greedy strategies and do
  not promise an optimal answer.

## Running the tests

```
pip install .[test]
pytest
```