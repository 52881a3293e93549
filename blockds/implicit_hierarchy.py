"""K-way hierarchies stored compactly, the position of a block giving its place in the tree."""

from __future__ import annotations

from typing import Optional

from blockds.compact_memory_manager import CompactMemoryManager
from blockds.hierarchy import BinaryHierarchy, Hierarchy, UnavailableFunctionCall
from blockds.memory_manager import INVALID_INDEX, MemoryBlock


def _unavailable(method_name: str, detail: str = "") -> UnavailableFunctionCall:
    """Build the error for a structural change an implicit hierarchy cannot make."""
    message = f"Method {method_name}() unavailable in implicit hierarchies!"
    if detail:
        message = f"{message} ({detail})"
    return UnavailableFunctionCall(message)


class ImplicitHierarchy(Hierarchy):
    """A complete K-way tree kept in a compact array, filled level by level.

    The sons of the block at index ``i`` live at ``k * i + 1`` to ``k * i + k``.
    Blocks are added and removed only at the last leaf.
    """

    def __init__(self, k: int) -> None:
        if k < 2:
            raise ValueError("an implicit hierarchy needs k of at least 2")
        self._k = k
        self._memory = CompactMemoryManager()

    @property
    def k(self) -> int:
        """Maximum number of sons of a block."""
        return self._k

    def size(self) -> int:
        """Number of blocks in the hierarchy."""
        return self._memory.allocated_block_count

    def is_empty(self) -> bool:
        """True when the hierarchy holds no blocks."""
        return self.size() == 0

    def clear(self) -> None:
        """Remove every block."""
        self._memory.clear()

    def calculate_index(self, node: MemoryBlock) -> int:
        """Position of ``node`` in the storage, or ``INVALID_INDEX``."""
        return self._memory.calculate_index(node)

    def level(self, node: MemoryBlock) -> int:
        """Depth of ``node``; the root is at level 0."""
        return self.level_of_index(self._index_of(node))

    def level_of_index(self, index: int) -> int:
        """Depth of the block stored at ``index``."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        level = 0
        level_start = 0
        level_width = 1
        while index >= level_start + level_width:
            level_start += level_width
            level_width *= self._k
            level += 1
        return level

    def degree(self, node: MemoryBlock) -> int:
        """Number of sons of ``node``."""
        return self.degree_of_index(self._index_of(node))

    def degree_of_index(self, index: int) -> int:
        """Number of sons of the block stored at ``index``."""
        size = self.size()
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range")
        current_level = self.level_of_index(index)
        index_of_last = size - 1
        depth = self.level_of_index(index_of_last)
        if current_level == depth:
            return 0
        if current_level == depth - 1:
            index_of_lasts_parent = self.index_of_parent(index_of_last)
            if index < index_of_lasts_parent:
                return self._k
            if index > index_of_lasts_parent:
                return 0
            remainder = index_of_last % self._k
            return self._k if remainder == 0 else remainder
        return self._k

    def node_count(self, node: Optional[MemoryBlock] = None) -> int:
        """Blocks in the subtree of ``node``; the whole hierarchy without one."""
        if node is None or self._index_of(node) == 0:
            return self.size()
        return super().node_count(node)

    def access_root(self) -> Optional[MemoryBlock]:
        """The root block, or None when empty."""
        return self._memory.get_block_at(0) if self.size() > 0 else None

    def access_parent(self, node: MemoryBlock) -> Optional[MemoryBlock]:
        """The parent of ``node``, or None for the root."""
        index = self.index_of_parent(self._index_of(node))
        return self._memory.get_block_at(index) if index != INVALID_INDEX else None

    def access_son(self, node: MemoryBlock, son_order: int) -> Optional[MemoryBlock]:
        """The son of ``node`` at ``son_order``, or None when there is none."""
        if not 0 <= son_order < self._k:
            return None
        index = self.index_of_son(self._index_of(node), son_order)
        return self._memory.get_block_at(index) if index < self.size() else None

    def access_last_leaf(self) -> Optional[MemoryBlock]:
        """The block stored last, or None when empty."""
        size = self.size()
        return self._memory.get_block_at(size - 1) if size != 0 else None

    def emplace_root(self) -> MemoryBlock:
        """Always raises: the root exists as soon as the first leaf is inserted."""
        raise _unavailable("emplace_root")

    def change_root(self, new_root: Optional[MemoryBlock]) -> None:
        """Always raises: blocks cannot be moved in an implicit hierarchy."""
        raise _unavailable("change_root")

    def emplace_son(self, parent: MemoryBlock, son_order: int) -> MemoryBlock:
        """Always raises: sons are added only through ``insert_last_leaf``."""
        raise _unavailable("emplace_son", self._describe_son(parent, son_order))

    def change_son(
        self, parent: MemoryBlock, son_order: int, new_son: Optional[MemoryBlock]
    ) -> None:
        """Always raises: blocks cannot be moved in an implicit hierarchy."""
        detail = self._describe_son(parent, son_order)
        if new_son is not None:
            detail = f"{detail}, new son at index {self._describe_index(new_son)}"
        raise _unavailable("change_son", detail)

    def remove_son(self, parent: MemoryBlock, son_order: int) -> None:
        """Always raises: sons are removed only through ``remove_last_leaf``."""
        raise _unavailable("remove_son", self._describe_son(parent, son_order))

    def insert_last_leaf(self) -> MemoryBlock:
        """Append a new block as the last leaf."""
        return self._memory.allocate_memory()

    def remove_last_leaf(self) -> None:
        """Remove the last leaf."""
        self._memory.release_memory()

    def index_of_parent(self, index: int) -> int:
        """Index of the parent of the block at ``index``, or ``INVALID_INDEX`` for the root."""
        return INVALID_INDEX if index == 0 else (index - 1) // self._k

    def index_of_son(self, parent_index: int, son_order: int) -> int:
        """Index where the son at ``son_order`` of the block at ``parent_index`` lives."""
        return self._k * parent_index + son_order + 1

    def _index_of(self, node: MemoryBlock) -> int:
        index = self._memory.calculate_index(node)
        if index == INVALID_INDEX:
            raise ValueError("block does not belong to this hierarchy")
        return index

    def _describe_index(self, node: MemoryBlock) -> str:
        index = self._memory.calculate_index(node)
        return "none" if index == INVALID_INDEX else str(index)

    def _describe_son(self, parent: MemoryBlock, son_order: int) -> str:
        return f"parent at index {self._describe_index(parent)}, son order {son_order}"


class BinaryImplicitHierarchy(BinaryHierarchy, ImplicitHierarchy):
    """An implicit hierarchy where every block has at most two sons."""

    def __init__(self) -> None:
        super().__init__(2)