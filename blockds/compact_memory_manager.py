"""A manager that keeps its blocks packed one after another with a capacity."""

from __future__ import annotations

from blockds.memory_manager import INVALID_INDEX, MemoryBlock, MemoryManager


class CompactMemoryManager(MemoryManager):
    """Keeps allocated blocks contiguous, indexed from zero, within a capacity.

    The capacity doubles whenever an allocation would exceed it.
    """

    INIT_SIZE = 4

    def __init__(self, capacity: int = INIT_SIZE) -> None:
        super().__init__(MemoryBlock)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._blocks: list[MemoryBlock] = []
        self._capacity = capacity

    @property
    def allocated_block_count(self) -> int:
        """Number of blocks currently allocated."""
        return len(self._blocks)

    @property
    def capacity(self) -> int:
        """Number of blocks that fit before the storage has to grow."""
        return self._capacity

    def allocate_memory(self) -> MemoryBlock:
        """Allocate a new block after the last one."""
        return self.allocate_memory_at(len(self._blocks))

    def allocate_memory_at(self, index: int) -> MemoryBlock:
        """Allocate a new block at ``index``, shifting later blocks back."""
        count = len(self._blocks)
        if not 0 <= index <= count:
            raise IndexError(f"cannot allocate at index {index}")
        if count == self._capacity:
            self.change_capacity(max(2 * count, 1))
        block = MemoryBlock()
        self._blocks.insert(index, block)
        return block

    def release_memory(self, block: MemoryBlock | None = None) -> None:
        """Release ``block`` and every block after it; without one, the last block."""
        if block is None:
            if not self._blocks:
                raise IndexError("no block to release")
            del self._blocks[-1]
            return
        index = self.calculate_index(block)
        if index == INVALID_INDEX:
            raise ValueError("block is not managed by this manager")
        del self._blocks[index:]

    def release_memory_at(self, index: int) -> None:
        """Release the block at ``index``, shifting later blocks forward."""
        self._check_index(index)
        del self._blocks[index]

    def assign(self, other: CompactMemoryManager) -> CompactMemoryManager:
        """Make this manager a copy of ``other``, data and capacity included."""
        if other is not self:
            self._blocks = [MemoryBlock(block.data) for block in other._blocks]
            self._capacity = other._capacity
        return self

    def change_capacity(self, new_capacity: int) -> None:
        """Set the capacity, releasing blocks that no longer fit."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        if new_capacity == self._capacity:
            return
        if new_capacity < len(self._blocks):
            del self._blocks[new_capacity:]
        self._capacity = new_capacity

    def shrink_memory(self) -> None:
        """Reduce the capacity to the block count, but not below ``INIT_SIZE``."""
        self.change_capacity(max(len(self._blocks), self.INIT_SIZE))

    def clear(self) -> None:
        """Release all blocks; the capacity stays."""
        self._blocks.clear()

    def equals(self, other: CompactMemoryManager) -> bool:
        """True when both managers hold the same data in the same order."""
        if other is self:
            return True
        return len(self._blocks) == len(other._blocks) and all(
            mine.data == theirs.data for mine, theirs in zip(self._blocks, other._blocks)
        )

    def calculate_index(self, block: MemoryBlock) -> int:
        """Position of ``block`` in this manager, or ``INVALID_INDEX``."""
        for index, candidate in enumerate(self._blocks):
            if candidate is block:
                return index
        return INVALID_INDEX

    def get_block_at(self, index: int) -> MemoryBlock:
        """The block at ``index``."""
        self._check_index(index)
        return self._blocks[index]

    def swap(self, index1: int, index2: int) -> None:
        """Exchange the contents of the blocks at the two positions."""
        first = self.get_block_at(index1)
        second = self.get_block_at(index2)
        first.data, second.data = second.data, first.data

    def dump(self) -> str:
        """A text picture of the storage: every slot up to the capacity."""
        count = len(self._blocks)
        lines = [
            "first = 0",
            f"last = {count}",
            f"limit = {self._capacity}",
            f"allocated = {count}",
        ]
        for slot in range(self._capacity):
            content = repr(self._blocks[slot].data) if slot < count else "<free>"
            line = f"|{slot}| {content}"
            if slot == 0:
                line += " <- first"
            elif slot == count:
                line += " <- last"
            lines.append(line)
        lines.append(f"{self._capacity}|<- limit")
        return "\n".join(lines)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._blocks):
            raise IndexError(f"index {index} out of range")