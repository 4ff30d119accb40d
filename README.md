# containerkit

Key-value containers for Python. The package provides `BSTMap`, a map
backed by an unbalanced binary search tree. The keys are ordered by a
comparison function that you pass in.

## Installation

```
pip install containerkit
```

## Comparison functions

A comparison function takes two keys `a` and `b` and returns:

- a negative number if `a` comes before `b`,
- zero if the keys are equal,
- a positive number if `a` comes after `b`.

## Usage

```python
from containerkit.bstmap import BSTMap, KeyNotFoundError, new_bst_map

def compare_int(a, b):
    return (a > b) - (a < b)

tree = BSTMap(compare_int)        # or: new_bst_map(compare_int)
tree.put(5, "a")
tree.put(2, "b")
tree.put(15, "c")

tree.get(2)            # "b"
tree.size()            # 3
len(tree)              # 3
tree.get_depth(15)     # 1
tree.get_parent(2)     # (5, "a")
tree.get_left(5)       # (2, "b")
tree.get_right(5)      # (15, "c")

tree.delete(2)
try:
    tree.get(2)
except KeyNotFoundError:
    pass
```

Calling `put` with a key that is already in the map replaces its value. The
size stays the same.

When a node with two children is deleted, its in-order predecessor (the
largest key in its left subtree) takes its place.

`get_depth` returns the number of edges from the root to the key's node; the
root has depth 0.

## Errors

All errors derive from `MapError`:

- `KeyNotFoundError` is raised by `get`, `delete`, `get_depth`, `get_left`,
  `get_right` and `get_parent` when the key is not in the map. It is also a
  `LookupError`.
- `CompareNotProvidedError` is raised by every lookup, insert or delete when
  the map was created without a comparison function (`BSTMap()`).
- A plain `MapError` is raised by `get_right` or `get_left` when the node has
  no such child ("right child not found", "left child not found"), and by
  `get_parent` when the key is at the root ("root has no parent").

## Inspecting the tree

- `print_levels(file=None)` writes the tree level by level, each key
  right-aligned in a five-character cell. Missing children appear as `nil`.
- `ascii_print(file=None)` writes the tree turned on its side, with the right
  subtree above each key and the left subtree below, indented four spaces
  per level.

Both write to `file` when it is given (any text stream, such as an
`io.StringIO`) and to standard output otherwise. An empty tree prints
`(empty tree)`.

## The `Map` interface

`Map` is an abstract base class declaring `put`, `get`, `delete` and `size`.
`BSTMap` implements it.

## What it does not do

The tree is not self-balancing: inserting keys in sorted order gives a tree
as deep as it has keys. The map offers no iteration over its keys or values
and no range queries.

## Running the tests

```
pip install -e ".[test]"
pytest
```