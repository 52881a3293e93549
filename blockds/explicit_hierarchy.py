"""Hierarchies whose blocks are linked to their parent and sons by references."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from blockds.hierarchy import BinaryHierarchy, Hierarchy
from blockds.memory_manager import MemoryBlock, MemoryManager


@dataclass(eq=False)
class ExplicitHierarchyBlock(MemoryBlock):
    """A block that knows its parent."""

    parent: Optional[ExplicitHierarchyBlock] = field(default=None, repr=False)


@dataclass(eq=False)
class MultiWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with any number of sons kept in order."""

    sons: list = field(default_factory=list)


@dataclass(eq=False)
class KWayExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with a fixed number of son positions, each possibly empty."""

    sons: list = field(default_factory=list)


@dataclass(eq=False)
class BinaryExplicitHierarchyBlock(ExplicitHierarchyBlock):
    """A block with a left and a right son."""

    left: Optional[BinaryExplicitHierarchyBlock] = None
    right: Optional[BinaryExplicitHierarchyBlock] = None


class ExplicitHierarchy(Hierarchy):
    """A hierarchy of linked blocks, reachable from its root."""

    def __init__(self, block_type: Callable[[], ExplicitHierarchyBlock]) -> None:
        self._memory = MemoryManager(block_type)
        self._root: Optional[ExplicitHierarchyBlock] = None

    @abstractmethod
    def _empty_like(self) -> ExplicitHierarchy:
        """A new empty hierarchy of the same kind."""

    def _numbered_sons(self, node: Any) -> Iterator[tuple[int, Any]]:
        """Existing sons of ``node`` with their positions."""
        remaining = self.degree(node)
        order = 0
        while remaining > 0:
            son = self.access_son(node, order)
            if son is not None:
                remaining -= 1
                yield order, son
            order += 1

    def _release_subtree(self, node: Optional[Any]) -> None:
        def release(block: Any) -> None:
            # Blocks adopted through change_root were not allocated here.
            if self._memory.allocated_block_count > 0:
                self._memory.release_memory(block)

        self.process_post_order(node, release)

    def assign(self, other: ExplicitHierarchy) -> ExplicitHierarchy:
        """Make this hierarchy a structural copy of ``other``."""
        if not isinstance(other, ExplicitHierarchy):
            raise TypeError("can only assign from an explicit hierarchy")
        if other is self:
            return self
        self.clear()
        if other._root is None:
            return self
        root = self.emplace_root()
        pending = [(root, other._root)]
        while pending:
            mine, theirs = pending.pop()
            mine.data = theirs.data
            for order, their_son in other._numbered_sons(theirs):
                pending.append((self.emplace_son(mine, order), their_son))
        return self

    def copy(self) -> ExplicitHierarchy:
        """A new hierarchy with the same structure and data."""
        return self._empty_like().assign(self)

    def clear(self) -> None:
        """Remove every block."""
        self._release_subtree(self._root)
        self._root = None

    def size(self) -> int:
        """Number of blocks reachable from the root."""
        return self.node_count() if self._root is not None else 0

    def is_empty(self) -> bool:
        """True when there is no root."""
        return self._root is None

    def equals(self, other: Any) -> bool:
        """True when ``other`` has the same shape with equal data in every block."""
        if not isinstance(other, ExplicitHierarchy):
            return False
        pending = [(self._root, other._root)]
        while pending:
            mine, theirs = pending.pop()
            if mine is None and theirs is None:
                continue
            if mine is None or theirs is None:
                return False
            son_count = self.degree(mine)
            if son_count != other.degree(theirs):
                return False
            if not (mine.data == theirs.data):
                return False
            processed = 0
            order = 0
            while processed < son_count:
                my_son = self.access_son(mine, order)
                if my_son is not None:
                    processed += 1
                pending.append((my_son, other.access_son(theirs, order)))
                order += 1
        return True

    def access_root(self) -> Optional[ExplicitHierarchyBlock]:
        """The root, or None when empty."""
        return self._root

    def access_parent(self, node: ExplicitHierarchyBlock) -> Optional[ExplicitHierarchyBlock]:
        """The parent of ``node``, or None for a root."""
        return node.parent

    def emplace_root(self) -> ExplicitHierarchyBlock:
        """Create a new root block; an existing root is left detached."""
        self._root = self._memory.allocate_memory()
        return self._root

    def change_root(self, new_root: Optional[ExplicitHierarchyBlock]) -> None:
        """Make ``new_root`` the root, detaching it from any parent."""
        if new_root is not None:
            new_root.parent = None
        self._root = new_root


class MultiWayExplicitHierarchy(ExplicitHierarchy):
    """An explicit hierarchy whose blocks may have any number of sons."""

    def __init__(self) -> None:
        super().__init__(MultiWayExplicitHierarchyBlock)

    def _empty_like(self) -> MultiWayExplicitHierarchy:
        return type(self)()

    def degree(self, node: MultiWayExplicitHierarchyBlock) -> int:
        """Number of sons of ``node``."""
        return len(node.sons)

    def access_son(
        self, node: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> Optional[MultiWayExplicitHierarchyBlock]:
        """The son at ``son_order``, or None when out of range."""
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: MultiWayExplicitHierarchyBlock, son_order: int
    ) -> MultiWayExplicitHierarchyBlock:
        """Insert a new son at ``son_order``, shifting later sons."""
        if not 0 <= son_order <= len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        son = self._memory.allocate_memory()
        parent.sons.insert(son_order, son)
        son.parent = parent
        return son

    def change_son(
        self,
        parent: MultiWayExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[MultiWayExplicitHierarchyBlock],
    ) -> None:
        """Replace the son at ``son_order`` with ``new_son``."""
        if not 0 <= son_order < len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: MultiWayExplicitHierarchyBlock, son_order: int) -> None:
        """Remove the son at ``son_order`` with its subtree, shifting later sons."""
        if not 0 <= son_order < len(parent.sons):
            raise IndexError(f"son order {son_order} out of range")
        self._release_subtree(parent.sons[son_order])
        del parent.sons[son_order]


class KWayExplicitHierarchy(ExplicitHierarchy):
    """An explicit hierarchy whose blocks have ``k`` son positions."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self._k = k
        super().__init__(lambda: KWayExplicitHierarchyBlock(sons=[None] * k))

    @property
    def k(self) -> int:
        """Number of son positions of a block."""
        return self._k

    def _empty_like(self) -> KWayExplicitHierarchy:
        return type(self)(self._k)

    def degree(self, node: KWayExplicitHierarchyBlock) -> int:
        """Number of occupied son positions."""
        return sum(1 for son in node.sons if son is not None)

    def access_son(
        self, node: KWayExplicitHierarchyBlock, son_order: int
    ) -> Optional[KWayExplicitHierarchyBlock]:
        """The son at ``son_order``, or None when empty or out of range."""
        if 0 <= son_order < len(node.sons):
            return node.sons[son_order]
        return None

    def emplace_son(
        self, parent: KWayExplicitHierarchyBlock, son_order: int
    ) -> KWayExplicitHierarchyBlock:
        """Put a new son at position ``son_order``."""
        self._check_order(son_order)
        son = self._memory.allocate_memory()
        parent.sons[son_order] = son
        son.parent = parent
        return son

    def change_son(
        self,
        parent: KWayExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[KWayExplicitHierarchyBlock],
    ) -> None:
        """Replace the son at position ``son_order`` with ``new_son``."""
        self._check_order(son_order)
        old_son = parent.sons[son_order]
        parent.sons[son_order] = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_son(self, parent: KWayExplicitHierarchyBlock, son_order: int) -> None:
        """Remove the son at ``son_order`` with its subtree, leaving the position empty."""
        self._check_order(son_order)
        self._release_subtree(parent.sons[son_order])
        parent.sons[son_order] = None

    def _check_order(self, son_order: int) -> None:
        if not 0 <= son_order < self._k:
            raise IndexError(f"son order {son_order} out of range")


class BinaryExplicitHierarchy(BinaryHierarchy, ExplicitHierarchy):
    """An explicit hierarchy of blocks with a left and a right son."""

    def __init__(self) -> None:
        super().__init__(BinaryExplicitHierarchyBlock)

    def _empty_like(self) -> BinaryExplicitHierarchy:
        return type(self)()

    def degree(self, node: BinaryExplicitHierarchyBlock) -> int:
        """Number of present sons, 0 to 2."""
        return (node.left is not None) + (node.right is not None)

    def access_son(
        self, node: BinaryExplicitHierarchyBlock, son_order: int
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        """The left son for 0, the right son for 1, otherwise None."""
        if son_order == self.LEFT_SON_INDEX:
            return node.left
        if son_order == self.RIGHT_SON_INDEX:
            return node.right
        return None

    def emplace_son(
        self, parent: BinaryExplicitHierarchyBlock, son_order: int
    ) -> BinaryExplicitHierarchyBlock:
        """Create the left son for order 0, the right son otherwise."""
        if son_order == self.LEFT_SON_INDEX:
            return self.insert_left_son(parent)
        return self.insert_right_son(parent)

    def change_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        son_order: int,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        """Replace the left son for order 0, the right son otherwise."""
        if son_order == self.LEFT_SON_INDEX:
            self.change_left_son(parent, new_son)
        else:
            self.change_right_son(parent, new_son)

    def remove_son(self, parent: BinaryExplicitHierarchyBlock, son_order: int) -> None:
        """Remove the left son for order 0, the right son otherwise."""
        if son_order == self.LEFT_SON_INDEX:
            self.remove_left_son(parent)
        else:
            self.remove_right_son(parent)

    def access_left_son(
        self, node: BinaryExplicitHierarchyBlock
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        """The left son, or None."""
        return node.left

    def access_right_son(
        self, node: BinaryExplicitHierarchyBlock
    ) -> Optional[BinaryExplicitHierarchyBlock]:
        """The right son, or None."""
        return node.right

    def is_left_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        """True when ``node`` is the left son of its parent."""
        return node.parent is not None and node.parent.left is node

    def is_right_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        """True when ``node`` is the right son of its parent."""
        return node.parent is not None and node.parent.right is node

    def has_left_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        """True when ``node`` has a left son."""
        return node.left is not None

    def has_right_son(self, node: BinaryExplicitHierarchyBlock) -> bool:
        """True when ``node`` has a right son."""
        return node.right is not None

    def insert_left_son(self, parent: BinaryExplicitHierarchyBlock) -> BinaryExplicitHierarchyBlock:
        """Create a new left son of ``parent``."""
        son = self._memory.allocate_memory()
        parent.left = son
        son.parent = parent
        return son

    def insert_right_son(self, parent: BinaryExplicitHierarchyBlock) -> BinaryExplicitHierarchyBlock:
        """Create a new right son of ``parent``."""
        son = self._memory.allocate_memory()
        parent.right = son
        son.parent = parent
        return son

    def change_left_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        """Replace the left son of ``parent`` with ``new_son``."""
        old_son = parent.left
        parent.left = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def change_right_son(
        self,
        parent: BinaryExplicitHierarchyBlock,
        new_son: Optional[BinaryExplicitHierarchyBlock],
    ) -> None:
        """Replace the right son of ``parent`` with ``new_son``."""
        old_son = parent.right
        parent.right = new_son
        if old_son is not None:
            old_son.parent = None
        if new_son is not None:
            new_son.parent = parent

    def remove_left_son(self, parent: BinaryExplicitHierarchyBlock) -> None:
        """Remove the left son of ``parent`` with its subtree."""
        self._release_subtree(parent.left)
        parent.left = None

    def remove_right_son(self, parent: BinaryExplicitHierarchyBlock) -> None:
        """Remove the right son of ``parent`` with its subtree."""
        self._release_subtree(parent.right)
        parent.right = None