# structkit

A compact collection of the classic data structures and algorithms, written
as plain Python objects and functions, with no third-party dependencies.

| Module | What it holds |
| --- | --- |
| `structkit.lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularSinglyLinkedList`, `CircularDoublyLinkedList` |
| `structkit.stacks` | `Stack` |
| `structkit.queues` | `LinkedQueue` (unbounded) and `CircularQueue` (fixed capacity) |
| `structkit.search` | `sequence_search`, `binary_search`, `binary_search_recursive` |
| `structkit.matching` | `force_match`, `kmp_next`, `kmp_match`, `render_chars` |
| `structkit.binary_tree` | `TreeNode`, `build_tree`, recursive `pre_order` / `in_order` / `post_order`, `level_order`, and the `*_iterative` traversals |
| `structkit.threaded_tree` | `ThreadNode`, `build_thread_tree`, `in_thread` / `pre_thread` / `post_thread` and the matching `walk_*_thread` generators |
| `structkit.bst` | `BinarySearchTree` |
| `structkit.avl` | `AVLTree` |
| `structkit.btree` | `BTree` |
| `structkit.huffman` | `HuffmanTree` |
| `structkit.adjacency_list` | `AdjacencyListGraph`, `Arc` |
| `structkit.graph_matrix` | `MatrixGraph` with `dfs` and `bfs` |
| `structkit.shortest_paths` | `dijkstra` (returns a `DijkstraResult`) and `floyd` |
| `structkit.spanning_trees` | `kruskal`, `prim`, `Edge` |
| `structkit.topological` | `in_degrees`, `topological_sort` |
| `structkit.dense_graph` / `structkit.sparse_graph` | `DenseGraph` (boolean matrix) and `SparseGraph` (adjacency lists) over node indexes |
| `structkit.graph_reader` | `read_graph`, `read_graph_lines` |
| `structkit.path_search` | `PathSearcher` (depth-first) and `ShortestPathSearcher` (breadth-first) |
| `structkit.cycle_detection` | `has_cycle` for undirected graphs |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Linked lists

Every list kind keeps a sentinel head and behaves like a Python container
(`len`, iteration, `==`). The doubly linked kinds also support `reversed`.
`remove` deletes the first matching item and raises `ValueError` if there is
none.

```python
from structkit.lists import DoublyLinkedList

items = DoublyLinkedList()
items.push_front(1)
items.push_front(2)
items.push_back(3)
print(list(items))            # [2, 1, 3]
print(list(reversed(items)))  # [3, 1, 2]
items.remove(1)
print(len(items))             # 2
print(items.render())         # 2 -> 3 -> NULL
```

### Stack and queues

`Stack.pop` and `Stack.peek` raise `IndexError` when the stack is empty;
iteration runs from the top down. `dequeue` raises `IndexError` on an empty
queue. A `CircularQueue` always keeps one slot free, so a capacity of 5 (the
default) holds at most 4 items; `enqueue` on a full queue raises
`OverflowError`.

```python
from structkit.stacks import Stack
from structkit.queues import CircularQueue

stack = Stack()
for value in (1, 2, 3):
    stack.push(value)
print(stack.pop())      # 3
print(stack.render())   # 2 -> 1 -> NULL

queue = CircularQueue(5)
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue())  # 1
```

### Searching

All three functions return an index, or -1 when the key is absent.
The binary searches expect sorted input.

```python
from structkit.search import binary_search, sequence_search

print(binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9], 7))  # 6
print(sequence_search([1, 2, 3, 4], 5))               # -1
```

### String matching

```python
from structkit.matching import force_match, kmp_match, kmp_next

table = kmp_next("abc")
print(table)                              # [-1, 0, 0]
print(kmp_match("xxabcxx", "abc", table)) # True
print(force_match("xxabcxx", "abd"))      # False
```

### Binary trees

Trees are built from a pre-order listing in which `#` marks an empty child.
Traversals are generators.

```python
from structkit.binary_tree import build_tree, in_order, level_order

root = build_tree("AB##C##")
print(list(in_order(root)))     # ['B', 'A', 'C']
print(list(level_order(root)))  # ['A', 'B', 'C']
```

Threaded trees are built the same way, threaded once, then walked without a
stack:

```python
from structkit.threaded_tree import build_thread_tree, in_thread, walk_in_thread

root = in_thread(build_thread_tree("AB##C##"))
print(list(walk_in_thread(root)))  # ['B', 'A', 'C']
```

### Search trees and Huffman trees

```python
from structkit.avl import AVLTree
from structkit.btree import BTree
from structkit.huffman import HuffmanTree

avl = AVLTree([1, 8, 6, 7, 10])
print(list(avl.pre_order()))  # [6, 1, 8, 7, 10]
print(avl.height())           # 3

btree = BTree(5)              # a node splits once it holds 5 keys
for value in range(1, 20):
    btree.insert(value)
print(btree.render())         # one line of keys per node

huffman = HuffmanTree([5, 1, 3, 6, 11, 2, 4])
print(list(huffman.pre_order()))  # weights, root first
```

`BinarySearchTree` and `AVLTree` ignore duplicate keys; `BTree` keeps them.

### Weighted graphs

`MatrixGraph` takes vertex labels and a square matrix; an entry of 0 or
32767 means "no arc".

```python
from structkit.graph_matrix import MatrixGraph
from structkit.shortest_paths import dijkstra, floyd
from structkit.spanning_trees import kruskal, prim

graph = MatrixGraph("ABC", [[0, 1, 4], [1, 0, 2], [4, 2, 0]])
print(graph.dfs(0))                # ['A', 'B', 'C']
result = dijkstra(graph, 0)
print(result.distances)            # [0, 1, 3]
print(result.path_to(2))           # [0, 1, 2]
distances, predecessors = floyd(graph)
print(kruskal(graph))              # edges in the order they were taken
print(prim(graph, 0))
```

`topological_sort` raises `ValueError` on a cyclic graph, and `prim` raises
`ValueError` on a disconnected one.

### Index graphs, path finding and cycle detection

```python
from structkit.sparse_graph import SparseGraph
from structkit.path_search import ShortestPathSearcher
from structkit.cycle_detection import has_cycle

graph = SparseGraph(4, False)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.add_edge(2, 3)
searcher = ShortestPathSearcher(graph, 0)
print(searcher.path(3))         # [0, 1, 2, 3]
print(searcher.render_path(3))  # 0 -> 1 -> 2 -> 3
print(has_cycle(graph))         # False
```

Edges can also be loaded from a text file with `read_graph(graph, path)`:
the first line holds the node count and the edge count, and each following
line one edge as two node indexes. A node count that differs from the
graph's, a short file or an out-of-range node raises `ValueError`.

## Command line

The `structkit` command loads an undirected graph from such an edge-list
file, prints its adjacency lists (or, with `--dense`, its adjacency matrix),
then prints `has cycle:` followed by `1` or `0`:

```
structkit graph.txt
structkit graph.txt --nodes 13 --dense
```

`--nodes` gives the number of nodes and defaults to 9; it must match the
file's header. Errors reading the file are reported on standard error with
exit status 1.

## Limits

- The search trees (`BinarySearchTree`, `AVLTree`, `BTree`) support
  insertion and lookup or traversal only; there is no deletion.
- The command line only loads a graph and checks it for cycles; the other
  algorithms are available from Python only.