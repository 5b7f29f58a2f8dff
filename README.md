# dsakit

Small, dependency-free implementations of the classic data structures and
algorithms, each usable as a library and from a small console program.

## What is inside

| Module                      | Contents                                                        |
|-----------------------------|-----------------------------------------------------------------|
| `dsakit.sorting`            | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` |
| `dsakit.search`             | `binary_search` over an ascending sequence                      |
| `dsakit.bst`                | `Node`, `BinarySearchTree` with in-, pre- and post-order walks  |
| `dsakit.circular_queue`     | `CircularQueue`, a fixed-capacity FIFO queue                    |
| `dsakit.bounded_stack`      | `BoundedStack`, a fixed-capacity LIFO stack                     |
| `dsakit.linked_list`        | `LinkedList`, a size-limited singly linked list                 |
| `dsakit.adjacency_list`     | `AdjacencyList`, an undirected graph as neighbour lists         |
| `dsakit.adjacency_matrix`   | `AdjacencyMatrix`, a weighted, optionally directed graph        |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Sorting

Every sort takes any iterable of mutually comparable values and returns a
new list in ascending order; the input is left untouched. `merge_sort` is
stable.

```python
from dsakit.sorting import merge_sort, quick_sort

merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
quick_sort([3, 3, 1])      # [1, 3, 3]
```

### Binary search

`binary_search(values, key)` returns an index of `key` in the ascending
sequence `values`, or `None` when it is absent.

```python
from dsakit.search import binary_search

binary_search([1, 3, 5, 7], 5)   # 2
binary_search([1, 3, 5, 7], 4)   # None
```

### Binary search tree

`insert` returns `False` and leaves the tree unchanged when the value is
already present. The tree supports `len()`, `in` and iteration (in order).

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])

list(tree.inorder())    # [20, 30, 40, 50, 70]
list(tree.preorder())   # [50, 30, 20, 40, 70]
list(tree.postorder())  # [20, 40, 30, 70, 50]
tree.children(30)       # (20, 40)
tree.children(70)       # (None, None)
tree.find(40)           # the Node holding 40, or None if absent
```

`children` raises `KeyError` for a value that is not in the tree.

### Bounded containers

`CircularQueue` and `BoundedStack` take a `capacity` (default 5). They raise
`QueueFullError` / `StackFullError` when full, and `QueueEmptyError` /
`StackEmptyError` (both subclasses of `IndexError`) when read while empty.
Both support `len()`; the queue iterates front to rear, the stack top to
bottom.

```python
from dsakit.bounded_stack import BoundedStack, StackEmptyError
from dsakit.circular_queue import CircularQueue

queue = CircularQueue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()   # 1
queue.peek()      # 2

stack = BoundedStack(capacity=3)
stack.push(10)
stack.pop()       # 10
try:
    stack.pop()
except StackEmptyError:
    ...
```

### Linked list

`LinkedList(values=(), capacity=5)` is a singly linked list holding at most
`capacity` items.

- `add(data, position=0)` inserts at `position`; a position past the end
  appends, a negative one raises `IndexError`.
- `append(data)` adds at the end.
- `remove(position)` removes and returns the item there, raising
  `IndexError` when the list is empty or the position is out of range.
- `pop()` removes and returns the last item.
- `index(data)` returns the first position of `data`, or raises `ValueError`.

Adding to a full list raises `ListFullError`. The list supports `len()` and
iteration and prints as `1->2->3->NULL`.

### Graphs

`AdjacencyList(vertices)` stores an undirected graph over vertices
`0 .. vertices - 1`; `add_edge(u, v)` links two vertices both ways and
`neighbours(vertex)` lists them in the order edges were added.
`AdjacencyMatrix(vertices, directed=False)` stores integer edge weights, with
`add_edge(u, v, weight=1)`, `remove_edge(u, v)` and `weight(u, v)`; a weight
of 0 means no edge. Both raise `IndexError` for a vertex out of range and
render themselves as text with `format()`.

## Command-line programs

```
dsakit-sort [--algorithm {bubble,insertion,merge,quick,selection}] [NUMBER ...]
dsakit-search KEY [VALUE ...]
dsakit-bst
dsakit-queue [--capacity N]
dsakit-stack [--capacity N]
dsakit-linked-list
dsakit-adjacency-list
dsakit-adjacency-matrix
```

- `dsakit-sort` sorts the integers given on the command line (merge sort by
  default), or asks for them one by one when none are given.
- `dsakit-search` looks for `KEY` in the sorted integers that follow it.
- `dsakit-bst`, `dsakit-queue`, `dsakit-stack` and `dsakit-adjacency-matrix`
  present a menu of operations until you choose to exit.
- `dsakit-linked-list` reads five numbers into a list, shows it, and then
  runs a single chosen operation.
- `dsakit-adjacency-list` reads a vertex count and a list of edges, skipping
  invalid ones, and prints the adjacency lists.

All data lives in memory only; nothing is saved between runs.