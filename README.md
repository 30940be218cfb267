# classicds

Classic data structures and algorithms in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `classicds.sorting` | `heap_sort`, `quick_sort`, `bubble_sort`, `insertion_sort`, `merge_sort`, `cycle_sort`, `pancake_sort`, `stooge_sort`, `tim_sort` |
| `classicds.searching` | `linear_search`, `binary_search`, `recursive_binary_search`, `min_max` |
| `classicds.stacks` | `BoundedStack`, `LinkedStack`, `StackFullError`, `StackEmptyError` |
| `classicds.queues` | `CircularQueue`, `LinkedQueue`, `TwoStackQueue`, `QueueFullError`, `QueueEmptyError` |
| `classicds.deque` | `BoundedDeque`, `DequeFullError`, `DequeEmptyError` |
| `classicds.stack_problems` | `is_balanced`, `largest_rectangle_area` |
| `classicds.recursion` | `factorial`, `fibonacci`, `fibonacci_terms`, `product`, `is_armstrong` |
| `classicds.dynamic` | `fractional_knapsack`, `coin_change_ways`, `matrix_chain_order`, `MatrixChainResult` |
| `classicds.linked_lists` | `SinglyLinkedList`, `CircularLinkedList` |
| `classicds.linked_set` | `LinkedSet` |
| `classicds.hash_table` | `ChainedHashTable` |
| `classicds.avl` | `AVLTree`, `AVLNode` |
| `classicds.bst` | `BinarySearchTree`, `TreeNode`, `boundary_traversal` |
| `classicds.trie` | `Trie` |
| `classicds.binomial_heap` | `BinomialHeap` |
| `classicds.graphs` | `Graph` |
| `classicds.weighted` | `bellman_ford`, `prim_mst`, `ShortestPaths`, `MSTEdge`, `NegativeCycleError` |

## Examples

### Sorting and searching

Every sorting function takes any iterable and returns a new list in
ascending order; the input is left alone.

```python
from classicds.sorting import merge_sort, tim_sort

merge_sort([67, 23, 65, 10, 9, -12, 0])   # [-12, 0, 9, 10, 23, 65, 67]
tim_sort([5, 3, 1, 4], run=32)            # [1, 3, 4, 5]
```

Searches return an index, or `None` when the value is absent.
`recursive_binary_search` sorts its input first, so its index refers to the
sorted order. `min_max` returns a `(minimum, maximum)` pair and raises
`ValueError` for an empty input.

```python
from classicds.searching import binary_search, linear_search, min_max

linear_search([29, 3, 6], 6)      # 2
binary_search([1, 3, 5, 7], 4)    # None
min_max([-2, 45, 0, 11, -9])      # (-9, 45)
```

### Containers

Containers support `len`, `in` (where it makes sense) and iteration, and
operations that cannot proceed raise exceptions. `BoundedStack`,
`CircularQueue` and `BoundedDeque` take a `capacity` and raise their
`...FullError` when it is reached; removing from an empty container raises
the matching `...EmptyError` (subclasses of `IndexError`).

```python
from classicds.stacks import BoundedStack

stack = BoundedStack(capacity=5)
stack.push(1)
stack.push(2)
stack.pop()          # 2
len(stack)           # 1
```

```python
from classicds.trie import Trie

trie = Trie(["the", "a", "there", "answer", "any", "by", "bye", "their"])
"the" in trie        # True
"these" in trie      # False
```

`AVLTree` keeps distinct keys balanced and offers `preorder`, `inorder`,
`postorder` and a sideways text drawing with `render()`. `BinomialHeap`
provides `min()` and `extract_min()`. `ChainedHashTable` stores integers in
bucket `value % bucket_count`.

### Stack problems and dynamic programming

```python
from classicds.stack_problems import is_balanced, largest_rectangle_area
from classicds.dynamic import coin_change_ways, matrix_chain_order

is_balanced("{[()]}")                          # True
largest_rectangle_area([6, 2, 5, 4, 5, 1, 6])  # 12
coin_change_ways([1, 2, 3], 4)                 # 4
matrix_chain_order([10, 20, 30])               # MatrixChainResult(cost=6000, order='(M1 X M2)')
```

### Graphs

`Graph` is undirected by default; pass `directed=True` for a directed graph.
It offers `bfs`, `bfs_levels`, `dfs`, `dfs_forest`, `neighbors` and
`adjacency`.

`bellman_ford` returns a `ShortestPaths` with `distances` and
`predecessors`, and raises `NegativeCycleError` when a negative cycle is
reachable from the source. `prim_mst` returns one `MSTEdge` per vertex after
the first and raises `ValueError` if the graph is not connected.

```python
from classicds.weighted import bellman_ford

paths = bellman_ford("abc", [("a", "b", 4), ("b", "c", -2)], "a")
paths.distances      # {'a': 0, 'b': 4, 'c': 2}
```

## What it does not do

This is a library only. It has no command-line program and no interactive
menus; every structure and algorithm is used by importing it from Python.