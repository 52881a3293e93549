"""Trees: abstract data types built on top of hierarchies."""

from __future__ import annotations

import copy as _copy
from collections import deque
from typing import Any, Callable, Iterator, Optional

from blockds.explicit_hierarchy import (
    BinaryExplicitHierarchy,
    ExplicitHierarchy,
    KWayExplicitHierarchy,
    MultiWayExplicitHierarchy,
)
from blockds.hierarchy import Hierarchy
from blockds.implicit_hierarchy import BinaryImplicitHierarchy, ImplicitHierarchy


def _level_order(hierarchy: Hierarchy) -> Iterator[Any]:
    """Blocks of ``hierarchy`` level by level, sons in order."""
    root = hierarchy.access_root()
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        remaining = hierarchy.degree(node)
        order = 0
        while remaining > 0:
            son = hierarchy.access_son(node, order)
            if son is not None:
                remaining -= 1
                queue.append(son)
            order += 1


class GeneralTree:
    """A tree whose nodes live in the hierarchy it is built on."""

    def __init__(self, hierarchy_factory: Callable[[], Hierarchy]) -> None:
        self._factory = hierarchy_factory
        self._hierarchy = hierarchy_factory()

    @property
    def hierarchy(self) -> Hierarchy:
        """The hierarchy holding the nodes."""
        return self._hierarchy

    def _compatible(self, other: Any) -> bool:
        if not isinstance(other, GeneralTree):
            return False
        mine, theirs = self._hierarchy, other._hierarchy
        if type(mine) is not type(theirs):
            return False
        return getattr(mine, "k", None) == getattr(theirs, "k", None)

    def copy(self) -> GeneralTree:
        """A new tree of the same kind with the same shape and data."""
        clone = _copy.copy(self)
        clone._hierarchy = self._factory()
        return clone.assign(self)

    def assign(self, other: GeneralTree) -> GeneralTree:
        """Make this tree a copy of ``other``."""
        if other is self:
            return self
        if not self._compatible(other):
            raise TypeError("can only assign from a tree of the same kind")
        if isinstance(self._hierarchy, ExplicitHierarchy):
            self._hierarchy.assign(other._hierarchy)
        else:
            self._hierarchy.clear()
            for block in _level_order(other._hierarchy):
                self._hierarchy.insert_last_leaf().data = block.data
        return self

    def clear(self) -> None:
        """Remove every node."""
        self._hierarchy.clear()

    def size(self) -> int:
        """Number of nodes."""
        return self._hierarchy.size()

    def is_empty(self) -> bool:
        """True when the tree has no nodes."""
        return self._hierarchy.is_empty()

    def equals(self, other: Any) -> bool:
        """True when ``other`` is a tree of the same kind, shape and data."""
        if other is self:
            return True
        if not self._compatible(other):
            return False
        if isinstance(self._hierarchy, ExplicitHierarchy):
            return self._hierarchy.equals(other._hierarchy)
        if self.size() != other.size():
            return False
        return all(
            mine.data == theirs.data
            for mine, theirs in zip(
                _level_order(self._hierarchy), _level_order(other._hierarchy)
            )
        )

    def degree(self, node: Any) -> int:
        """Number of sons of ``node``."""
        return self._hierarchy.degree(node)

    def node_count(self, node: Optional[Any] = None) -> int:
        """Nodes in the subtree of ``node``; the whole tree without one."""
        return self._hierarchy.node_count(node)

    def access_root(self) -> Optional[Any]:
        """The root, or None when empty."""
        return self._hierarchy.access_root()

    def access_parent(self, node: Any) -> Optional[Any]:
        """The parent of ``node``, or None for the root."""
        return self._hierarchy.access_parent(node)

    def access_son(self, node: Any, son_order: int) -> Any:
        """The son of ``node`` at ``son_order``; raises IndexError when there is none."""
        son = self._hierarchy.access_son(node, son_order)
        if son is None:
            raise IndexError("No such son!")
        return son

    def insert_root(self) -> Any:
        """Create a new root node."""
        return self._hierarchy.emplace_root()

    def change_root(self, new_root: Optional[Any]) -> None:
        """Make ``new_root`` the root."""
        self._hierarchy.change_root(new_root)

    def emplace_son(self, parent: Any, son_order: int) -> Any:
        """Create a new son of ``parent`` at ``son_order``."""
        return self._hierarchy.emplace_son(parent, son_order)

    def change_son(self, parent: Any, son_order: int, new_son: Optional[Any]) -> None:
        """Replace the son of ``parent`` at ``son_order`` with ``new_son``."""
        self._hierarchy.change_son(parent, son_order, new_son)

    def remove_son(self, parent: Any, son_order: int) -> None:
        """Remove the son of ``parent`` at ``son_order`` with its subtree."""
        self._hierarchy.remove_son(parent, son_order)

    def is_root(self, node: Any) -> bool:
        """True when ``node`` has no parent."""
        return self._hierarchy.is_root(node)

    def is_nth_son(self, node: Any, son_order: int) -> bool:
        """True when ``node`` is its parent's son at ``son_order``."""
        return self._hierarchy.is_nth_son(node, son_order)

    def is_leaf(self, node: Any) -> bool:
        """True when ``node`` has no sons."""
        return self._hierarchy.is_leaf(node)

    def has_nth_son(self, node: Any, son_order: int) -> bool:
        """True when ``node`` has a son at ``son_order``."""
        return self._hierarchy.has_nth_son(node, son_order)


class MultiwayTree(GeneralTree):
    """A tree whose nodes may have any number of sons."""

    def __init__(self) -> None:
        super().__init__(MultiWayExplicitHierarchy)


class ImplicitKWayTree(GeneralTree):
    """A complete K-way tree stored compactly."""

    def __init__(self, k: int) -> None:
        super().__init__(lambda: ImplicitHierarchy(k))


class ExplicitKWayTree(GeneralTree):
    """A K-way tree of linked nodes with K son positions each."""

    def __init__(self, k: int) -> None:
        super().__init__(lambda: KWayExplicitHierarchy(k))


class ImplicitBinaryTree(GeneralTree):
    """A complete binary tree stored compactly."""

    def __init__(self) -> None:
        super().__init__(BinaryImplicitHierarchy)


class ExplicitBinaryTree(GeneralTree):
    """A binary tree of linked nodes."""

    def __init__(self) -> None:
        super().__init__(BinaryExplicitHierarchy)