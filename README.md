# blockds

`blockds` is a small library of classic data structures made from memory
blocks. Each structure gets its blocks from a memory manager, so the way it
lays out and links its data stays in plain view. It is meant for learning and
experimenting, not for speed. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `blockds.memory_manager`

- `MemoryBlock`: a cell with one `data` field. Blocks compare by identity.
- `MemoryManager`: `allocate_memory()` creates a block and
  `release_memory(block)` gives it back. The `allocated_block_count` property
  counts blocks in use. Releasing when nothing is allocated raises `ValueError`.
- `INVALID_INDEX` (`-1`): the index reported for a block that does not belong
  to a structure.

### `blockds.compact_memory_manager`

`CompactMemoryManager(capacity=4)` keeps its blocks packed in order, indexed
from zero. The `capacity` property holds the current capacity, which doubles
when an allocation would go past it. Operations:

- `allocate_memory()` and `allocate_memory_at(index)`.
- `release_memory(block)`, which releases the block and every block after it.
  Called with no block, it releases only the last one.
- `release_memory_at(index)` and `clear()`.
- `change_capacity(n)`, which drops any blocks that no longer fit.
- `shrink_memory()`, which reduces the capacity to the block count but never
  below `INIT_SIZE` (4).
- `assign(other)` and `equals(other)`, which compares data in order.
- `calculate_index(block)`, `get_block_at(index)` and `swap(i, j)`, which
  exchanges data.
- `dump()`, which returns a text picture of every slot up to the capacity.

A bad index raises `IndexError`.

### `blockds.abstract`

Abstract interfaces.

- `Sequence` declares positional and relative access, insertion and removal.
  It provides these itself:
  - `process_all_blocks_forward` and `process_all_blocks_backward`
  - `process_blocks_forward` and `process_blocks_backward`
  - `find_block_with_property` and `find_previous_to_block_with_property`
  - iteration over the data of its blocks
- `Network` declares nodes, relations and gate access.

### `blockds.hierarchy`

`Hierarchy` is the abstract rooted tree of blocks. It provides these for every
hierarchy:

- `level` and `node_count`
- `is_root`, `is_leaf`, `is_nth_son` and `has_nth_son`
- `process_post_order`, which does not recurse

`BinaryHierarchy` adds `LEFT_SON_INDEX` (0) and `RIGHT_SON_INDEX` (1).
`UnavailableFunctionCall` is raised for operations that a structure does not
support.

### `blockds.implicit_hierarchy`

`ImplicitHierarchy(k)` is a complete k-ary tree stored in a compact array. The
sons of index `i` are at `k*i + 1` to `k*i + k`.

- Blocks are added with `insert_last_leaf()` and removed with
  `remove_last_leaf()`.
- `emplace_root`, `change_root`, `emplace_son`, `change_son` and `remove_son`
  raise `UnavailableFunctionCall`.
- Index arithmetic is available as `level_of_index`, `degree_of_index`,
  `index_of_parent` and `index_of_son`.

`BinaryImplicitHierarchy()` is the same with `k = 2`.

### `blockds.explicit_hierarchy`

These hierarchies link each block to its parent and sons:

- `MultiWayExplicitHierarchy()`: any number of ordered sons. Inserting or
  removing a son shifts the sons after it.
- `KWayExplicitHierarchy(k)`: `k` son positions per block, each of which may be
  empty.
- `BinaryExplicitHierarchy()`: left and right sons, with the helpers
  `insert_left_son`, `insert_right_son`, `change_left_son`, `change_right_son`,
  `remove_left_son`, `remove_right_son`, `is_left_son`, `is_right_son`,
  `has_left_son` and `has_right_son`.

All three support:

- `emplace_root` and `change_root`
- `emplace_son`, `change_son` and `remove_son`; removing a son removes its
  whole subtree
- `size`, `is_empty` and `clear`
- `assign`, `copy` and `equals`, which compares structure and data

### `blockds.tree`

`GeneralTree` puts one interface over a hierarchy. The concrete trees are:

- `MultiwayTree()`
- `ImplicitKWayTree(k)`
- `ExplicitKWayTree(k)`
- `ImplicitBinaryTree()`
- `ExplicitBinaryTree()`

Each tree has `copy`, `assign` and `equals`, which work only between trees of
the same kind and `k`. `access_son` raises `IndexError` when the son does not
exist. The underlying hierarchy is reachable as `tree.hierarchy`. In the
implicit trees, nodes are added through `tree.hierarchy.insert_last_leaf()`.

## Example

```python
from blockds.explicit_hierarchy import MultiWayExplicitHierarchy

h = MultiWayExplicitHierarchy()
root = h.emplace_root()
root.data = 0
one = h.emplace_son(root, 0)
one.data = 1
two = h.emplace_son(root, 1)
two.data = 2

assert h.size() == 3
assert h.degree(root) == 2
assert h.access_parent(two) is root

other = h.copy()
assert h.equals(other)
h.remove_son(root, 1)
assert not h.equals(other)
```

```python
from blockds.implicit_hierarchy import ImplicitHierarchy

h = ImplicitHierarchy(3)
for value in range(7):
    h.insert_last_leaf().data = value

assert h.index_of_son(0, 2) == 3
assert h.index_of_parent(4) == 1
assert h.degree_of_index(0) == 3
```

## What is not included

`Sequence` and `Network` are interfaces only. The package has no concrete
sequence, network, list, stack, queue, table or sorting structure built on them.
It has no command-line program either.