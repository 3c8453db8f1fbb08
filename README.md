# algonotes

Classic algorithms and data structures as plain Python functions and
classes, with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.shortest_paths` | `bellman_ford`, `dijkstra_all_pairs`, `floyd`, `floyd_path`, `johnson`, `NegativeCycleError` |
| `algonotes.flows` | `FlowNetwork` with Edmonds–Karp, Dinic, ISAP and min-cost max-flow |
| `algonotes.spanning` | `DisjointSet`, `kruskal`, `prim` |
| `algonotes.graph_order` | `critical_path`, `strongly_connected_components`, `CycleError` |
| `algonotes.strings` | `failure_function`, `next_table`, `kmp_find_loop`, `kmp_find_next`, `kmp_find_recursive`, `longest_palindromic_subsequence` |
| `algonotes.dynamic` | `knapsack_01` (returning `KnapsackResult`), `group_knapsack`, `stone_merge`, `longest_monotone`, `max_assignment` |
| `algonotes.sorting` | `insertion_sort`, `shell_sort`, `bubble_sort`, `cocktail_sort`, `quick_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `counting_sort`, `bottom_up_merge_sort`, `linked_merge_sort`, `count_inversions` |
| `algonotes.searching` | `binary_search`, `halving_search`, `fibonacci_search` |
| `algonotes.binary_tree` | `Node`, `build_tree`, recursive and iterative traversals, `level_order`, `copy_tree`, `find_node`, `find_parent`, `insert_left_chain`, `delete_subtree` |
| `algonotes.threaded_tree` | `ThreadedNode`, `thread_inorder`, `first_in_order`, `last_in_order`, `next_in_order`, `previous_in_order`, `insert_left`, `insert_right`, `in_order`, `reverse_in_order` |
| `algonotes.huffman` | `HuffmanNode`, `huffman_tree`, `huffman_cost`, `internal_level_order` |
| `algonotes.splay` | `SplayTree`, `run_operations` |
| `algonotes.dates` | `Date`, `DateInterval` |
| `algonotes.queens` | `solve_queens`, `symmetries`, `distinct_solutions` |
| `algonotes.gf16` | `GF16`, `addition_table`, `multiplication_table`, `format_table` |
| `algonotes.strassen` | `matrix_add`, `matrix_sub`, `strassen_multiply` |
| `algonotes.linked_list` | `ListNode`, `split_odd` |

## Conventions

- Graph functions number vertices `1..n` and take edges as tuples
  `(x, y, weight)`; an edge naming a vertex outside that range raises
  `ValueError`.
- `bellman_ford` and `johnson` accept negative weights and raise
  `NegativeCycleError` (a `ValueError`) when a negative cycle exists; so
  does `floyd`. `floyd` and `johnson` return a dict keyed by
  `(source, target)` holding only reachable pairs.
- `dijkstra_all_pairs` takes a square weight matrix where `None` or
  `math.inf` marks a missing edge, and returns `math.inf` for unreachable
  pairs.
- `FlowNetwork` keeps the capacities as added; each algorithm works on its
  own copy, so one network can be asked several times.
- `critical_path` raises `CycleError` when the activity network is cyclic.
- Sorting functions return a new sorted list and leave the input alone.
- Search functions take a sorted sequence and return a 0-based index or -1.
- `SplayTree.delete` raises `KeyError` for an absent key, `kth` raises
  `IndexError` out of range, and `predecessor` / `successor` return `None`
  when there is no such key.
- `Date` is immutable: `next_day` and `previous_day` return new dates,
  subtracting two dates gives a `DateInterval`, and adding an interval to a
  date gives a `Date`.
- `GF16` elements are built on the polynomial x^4 + x^3 + 1.

## Examples

Shortest paths with negative edges:

```python
from algonotes.shortest_paths import bellman_ford, NegativeCycleError

distances = bellman_ford(3, [(1, 2, 4), (2, 3, -2), (1, 3, 5)])

try:
    bellman_ford(2, [(1, 2, 1), (2, 1, -3)])
except NegativeCycleError:
    print("negative cycle")
```

Maximum flow:

```python
from algonotes.flows import FlowNetwork

net = FlowNetwork(4)
net.add_edge(1, 2, 3)
net.add_edge(2, 4, 2)
net.add_edge(1, 3, 2)
net.add_edge(3, 4, 3)
print(net.max_flow_dinic(1, 4))
```

Pattern search:

```python
from algonotes.strings import kmp_find_loop

kmp_find_loop("abcabcabd", "abcabd")   # index of the first match, or -1
```

Splay tree as an ordered multiset:

```python
from algonotes.splay import SplayTree

tree = SplayTree()
for key in (5, 1, 9, 1):
    tree.insert(key)
tree.kth(2)          # the second smallest key
tree.rank(9)
tree.successor(5)
```

Dates:

```python
from algonotes.dates import Date

d1 = Date(2020, 1, 31)
d2 = Date(2020, 10, 1)
print(d2 - d1)
```

## What it does not do

The package is a library only: it has no command-line programs and reads
nothing from standard input. Every function takes its data as Python
arguments and returns its result; printing or parsing input is left to the
caller (the one exception is `gf16.format_table`, which returns a table as
text).