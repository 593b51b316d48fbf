# dsakit

Textbook data structures and algorithms in plain Python, with no
third-party dependencies: comparison sorts, linear and binary search, a
binary search tree, singly and doubly linked lists, list splitting and
graph algorithms over adjacency and distance matrices.

## Installing

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
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsakit.searching` | `binary_search`, `linear_search` |
| `dsakit.basics` | `add_to_each`, `swap` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.linked_list` | `SinglyLinkedList` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList` |
| `dsakit.splitting` | `split_into_four`, `split_by_parity` |
| `dsakit.graphs` | `adjacency_matrix`, `breadth_first`, `depth_first`, `shortest_distances`, `path_matrix_stages`, `path_matrix` |
| `dsakit.cli` | the `dsakit` command |
| `dsakit.list_menu` | the `dsakit-list-menu` command |

### Sorting and searching

Every sort takes any iterable and returns a new sorted list; the input is
left untouched.

```python
from dsakit.sorting import merge_sort, quick_sort
from dsakit.searching import binary_search, linear_search

merge_sort([5, 3, 9, 1])          # [1, 3, 5, 9]
quick_sort([4, 4, 2, 8])          # [2, 4, 4, 8]

binary_search([1, 3, 5, 9], 5)    # 2 (values must be ascending)
linear_search([7, 2, 6], 6)       # 2 (first occurrence)
linear_search([7, 2, 6], 4)       # None
```

Both searches return a 0-based index, or `None` when the value is absent.

### Small helpers

`add_to_each(values, amount=5)` returns a new list with `amount` added to
every value; `swap(a, b)` returns `(b, a)`.

### Binary search tree

`BinarySearchTree` is unbalanced; equal values go into the left subtree.

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)

list(tree.inorder())     # [20, 30, 40, 50, 70]
list(tree.preorder())    # [50, 30, 20, 40, 70]
list(tree.postorder())   # [20, 40, 30, 70, 50]
tree.smallest()          # 20
tree.largest()           # 70
tree.delete(30)          # True; False when the value is not in the tree
```

`smallest()` and `largest()` raise `ValueError` on an empty tree. Deleting
a node with two children replaces its value with that of its in-order
successor.

### Linked lists

`SinglyLinkedList` and `DoublyLinkedList` can be built from an iterable
and support `len()`, iteration, `append`, `add_at_begin`,
`add_after(location, value)` and `delete_at(location)`. Locations are
1-based; a location outside `1..len(list)` raises `IndexError`.
`delete_at` returns the removed value.

`SinglyLinkedList` also has `delete_all(key)`, which removes every node
equal to `key` and returns how many were removed, `sort()`, which sorts in
place, and `render()`, which gives text such as `1-->2-->3-->` (or
`List is empty.`). `DoublyLinkedList` can be walked backwards with
`reversed()`.

```python
from dsakit.linked_list import SinglyLinkedList
from dsakit.doubly_linked_list import DoublyLinkedList

numbers = SinglyLinkedList([3, 1])
numbers.add_at_begin(2)
numbers.sort()
list(numbers), len(numbers)       # ([1, 2, 3], 3)
numbers.render()                  # '1-->2-->3-->'

both_ways = DoublyLinkedList([1, 2, 3])
both_ways.add_after(1, 9)
list(reversed(both_ways))         # [3, 2, 9, 1]
```

### Splitting

`split_into_four(values)` deals the values in turn onto four lists:

```python
from dsakit.splitting import split_into_four, split_by_parity

split_into_four([1, 2, 3, 4, 5, 6])   # ([1, 5], [2, 6], [3], [4])
```

`split_by_parity(values, count)` takes the values in pairs. When `count`
is odd, the first value of each pair goes to the first (odd) list; when it
is even, the second value of each pair goes to the second (even) list. The
other list stays empty:

```python
split_by_parity([1, 2, 3, 4, 5], 5)      # ([1, 3, 5], [])
split_by_parity([1, 2, 3, 4, 5, 6], 6)   # ([], [2, 4, 6])
```

### Graphs

Vertices are 0-based. Matrices are lists of rows and must be square
(`ValueError` otherwise).

```python
import math
from dsakit.graphs import (
    adjacency_matrix, breadth_first, depth_first,
    shortest_distances, path_matrix, path_matrix_stages,
)

matrix = adjacency_matrix(4, [(0, 1), (1, 2), (2, 3)], directed=True)
breadth_first(matrix, 0)      # [0, 1, 2, 3]
depth_first(matrix, 0)        # [0, 1, 2, 3]
path_matrix(matrix)           # reachability as a 0/1 matrix
for stage in path_matrix_stages(matrix):
    ...                       # the path matrix after each vertex k

shortest_distances([[0, 4, math.inf], [math.inf, 0, 1], [2, math.inf, 0]])
# [[0, 4, 5], [3, 0, 1], [2, 6, 0]]
```

`adjacency_matrix` raises `ValueError` for an edge naming a vertex outside
the graph, or for more edges than the graph can hold (n·(n−1) directed,
half that undirected). An undirected graph sets both directions.
`breadth_first` and `depth_first` raise `IndexError` for a start vertex
outside the graph; neighbours are visited in ascending order. In
`shortest_distances`, missing edges are given as `math.inf` or a large
number.

## Command-line tools

### `dsakit`

Runs one operation on integers given as arguments:

```
dsakit sort 5 3 9 1                       # bubble sort
dsakit binary-search 5 1 3 5 9            # target first, then ascending values
dsakit linear-search 6 7 2 6              # target first, then values
dsakit bst --order preorder 50 30 70      # inorder (default), preorder, postorder
dsakit shortest-paths 3 0 4 inf inf 0 1 2 inf 0
```

Search positions are printed 1-based. `shortest-paths` takes the number of
vertices followed by exactly n·n distances in row order; `inf` marks a
missing edge.

### `dsakit-list-menu`

An interactive menu for building a singly linked list, displaying it and
deleting every node that holds a given number. It reads whitespace-separated
integers from standard input, so it can be fed a prepared script:

```
printf '1\n3\n4\n5\n4\n2\n3\n4\n2\n4\n' | dsakit-list-menu
```

Choice 1 asks for a node count and then the node values (the first value
is always read), 2 displays the list, 3 deletes all nodes with a key and
reports how many went, 4 exits with status 1. Choice `-1` or the end of
input ends the menu with status 0; any other number prints
`Invalid choice`. A token that is not an integer raises `ValueError`.

## What the package does not do

- Nothing is stored: trees and lists live only in memory, and the command
  line tools keep no state between runs.
- The `dsakit` command covers sorting with bubble sort, the two searches,
  tree traversals and shortest distances only. The other sorts, the linked
  lists, splitting, breadth-first and depth-first search and path matrices
  are available from Python but have no command.
- The interactive menu handles one list and only creation, display and
  deletion by key.