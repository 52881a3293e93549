"""Memory blocks and the simplest block manager that hands them out one by one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

INVALID_INDEX = -1
"""Index returned when a block does not belong to a structure."""


@dataclass(eq=False)
class MemoryBlock:
    """A single storage cell holding one value.

    Blocks compare by identity: two distinct blocks are different cells even
    when they hold equal data.
    """

    data: Any = None


class MemoryManager:
    """Allocates independent blocks and counts how many are in use."""

    def __init__(self, block_type: Callable[[], MemoryBlock] = MemoryBlock) -> None:
        self._block_type = block_type
        self._allocated_block_count = 0

    def allocate_memory(self) -> MemoryBlock:
        """Create a fresh block and account for it."""
        block = self._block_type()
        self._allocated_block_count += 1
        return block

    def release_memory(self, block: MemoryBlock) -> None:
        """Give back a block previously obtained from this manager."""
        if self._allocated_block_count == 0:
            raise ValueError("no allocated blocks to release")
        self._allocated_block_count -= 1

    @property
    def allocated_block_count(self) -> int:
        """Number of blocks currently allocated."""
        return self._allocated_block_count