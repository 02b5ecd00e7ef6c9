# dsakit

A collection of classic data structures and algorithms, a handful of
design-pattern examples and a small command-line attendance register.

Everything is pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Algorithms and data structures

| Module                   | Contents                                                                 |
|--------------------------|--------------------------------------------------------------------------|
| `dsakit.sorting`         | `bubble_sort`, `bucket_sort`, `count_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `shell_sort` |
| `dsakit.hashing`         | `ChainingHash`, `LinearProbingHash`, `QuadraticProbingHash`              |
| `dsakit.array`           | `DynamicArray`, a growable and shrinkable array                          |
| `dsakit.stack`           | `Stack`, backed by a resizing array                                      |
| `dsakit.queues`          | `LinkedQueue` and `StackQueue` (a queue made of two stacks)              |
| `dsakit.linked_lists`    | `LinkedList` and `DoublyLinkedList`                                      |
| `dsakit.graphs`          | `bfs`, `dfs`, `bfs_nodes`, `dfs_nodes`, `dijkstra`, `bellman_ford`, `kruskal`, `prim`, `empty_matrix`, `GraphNode` |
| `dsakit.binary_tree`     | `BinaryTree` with level-order and depth-first traversals                 |
| `dsakit.bst`             | `BinarySearchTree` with insertion, search and removal                    |
| `dsakit.avl`             | `AVLTree`, a self-balancing search tree                                  |
| `dsakit.heap`            | `MaxHeap` with heap sort                                                 |
| `dsakit.segment_tree`    | `SegmentTree` for range sums with point updates                          |
| `dsakit.trie`            | `Trie` for words made of the letters `a` to `z`                          |

Every sorting function takes an iterable of integers and returns a new
sorted list. `bucket_sort`, `count_sort` and `radix_sort` accept only
non-negative integers and raise `ValueError` otherwise.

A few examples:

```python
from dsakit.hashing import ChainingHash
from dsakit.segment_tree import SegmentTree
from dsakit.trie import Trie

table = ChainingHash()
table.insert_all([10, 15, 17, 9, 20, 29, 55, 99, 49, 39])
print(29 in table)        # True
print(3 in table)         # False

tree = SegmentTree([3, 8, 6, 7, -2, -8, 4, 9])
print(tree.query(1, 4))   # 19
tree.update(2, 8)
print(tree.query(1, 4))   # 21

words = Trie(["the", "a", "there", "their", "any"])
print(words.search("there"))   # True
print("data" in words)         # False
```

Graph functions work on adjacency matrices whose vertices are numbered
from 1; `empty_matrix` builds one filled with a chosen value (by default
`dsakit.graphs.INF`, which marks a missing edge for the shortest-path and
spanning-tree algorithms).

## Design patterns

`dsakit.patterns` holds small, self-contained examples:

- `dsakit.patterns.composite`: `Creature`, a drawable `Group` of `Circle`
  objects, and `Neuron` / `NeuronLayer`, which connect to each other the
  same way whether one side is a single neuron or a whole layer.
- `dsakit.patterns.singleton`: `SingletonDatabase`, `DummyDatabase` and a
  `RecordFinder` that accepts either.
- `dsakit.patterns.solid`: relationship browsing (`Relationships`,
  `research`), product filtering with combinable specifications
  (`ColorSpec(...) & SizeSpec(...)`), and a `Journal` saved by a
  `PersistenceManager`.

## Attendance register

```
dsakit-attendance
```

Answer `n` when asked whether you have the data, then enter the number of
students, the class name and the student names; the names are stored in
`data.txt` in the current directory. On later runs answer `y`: each
student is shown in turn and you mark them `p` (present) or `a` (absent);
any other answer leaves them unmarked. A summary of who is present,
absent or not marked is printed at the end.

Use `--data PATH` to keep the names in another file.

The same steps are available from Python through
`dsakit.attendance.save_students`, `load_students`, `status_from_answer`
and `report`.

## What is not included

- There is no database or query prompt: the package stores nothing
  beyond the attendance register's list of names.
- The design-pattern examples cover composite, singleton and SOLID only;
  there are no decorator-pattern examples.