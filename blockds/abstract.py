"""Abstract sequence and network memory structures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional

from blockds.memory_manager import MemoryBlock


class Sequence(ABC):
    """A linear arrangement of blocks with positional and relative access."""

    @abstractmethod
    def calculate_index(self, block: MemoryBlock) -> int:
        """Position of ``block``, or ``INVALID_INDEX`` when it is not here."""

    @abstractmethod
    def access_first(self) -> Optional[MemoryBlock]:
        """The first block, or None when empty."""

    @abstractmethod
    def access_last(self) -> Optional[MemoryBlock]:
        """The last block, or None when empty."""

    @abstractmethod
    def access(self, index: int) -> Optional[MemoryBlock]:
        """The block at ``index``, or None when out of range."""

    @abstractmethod
    def access_next(self, block: MemoryBlock) -> Optional[MemoryBlock]:
        """The block after ``block``, or None."""

    @abstractmethod
    def access_previous(self, block: MemoryBlock) -> Optional[MemoryBlock]:
        """The block before ``block``, or None."""

    @abstractmethod
    def insert_first(self) -> MemoryBlock:
        """Insert a new first block."""

    @abstractmethod
    def insert_last(self) -> MemoryBlock:
        """Insert a new last block."""

    @abstractmethod
    def insert(self, index: int) -> MemoryBlock:
        """Insert a new block at ``index``."""

    @abstractmethod
    def insert_after(self, block: MemoryBlock) -> MemoryBlock:
        """Insert a new block right after ``block``."""

    @abstractmethod
    def insert_before(self, block: MemoryBlock) -> MemoryBlock:
        """Insert a new block right before ``block``."""

    @abstractmethod
    def remove_first(self) -> None:
        """Remove the first block."""

    @abstractmethod
    def remove_last(self) -> None:
        """Remove the last block."""

    @abstractmethod
    def remove(self, index: int) -> None:
        """Remove the block at ``index``."""

    @abstractmethod
    def remove_next(self, block: MemoryBlock) -> None:
        """Remove the block after ``block``."""

    @abstractmethod
    def remove_previous(self, block: MemoryBlock) -> None:
        """Remove the block before ``block``."""

    def process_all_blocks_forward(self, operation: Callable[[MemoryBlock], Any]) -> None:
        """Apply ``operation`` to every block, first to last."""
        self.process_blocks_forward(self.access_first(), operation)

    def process_all_blocks_backward(self, operation: Callable[[MemoryBlock], Any]) -> None:
        """Apply ``operation`` to every block, last to first."""
        self.process_blocks_backward(self.access_last(), operation)

    def process_blocks_forward(
        self, block: Optional[MemoryBlock], operation: Callable[[MemoryBlock], Any]
    ) -> None:
        """Apply ``operation`` from ``block`` to the end."""
        while block is not None:
            operation(block)
            block = self.access_next(block)

    def process_blocks_backward(
        self, block: Optional[MemoryBlock], operation: Callable[[MemoryBlock], Any]
    ) -> None:
        """Apply ``operation`` from ``block`` back to the start."""
        while block is not None:
            operation(block)
            block = self.access_previous(block)

    def find_block_with_property(
        self, predicate: Callable[[MemoryBlock], bool]
    ) -> Optional[MemoryBlock]:
        """The first block satisfying ``predicate``, or None."""
        block = self.access_first()
        while block is not None and not predicate(block):
            block = self.access_next(block)
        return block

    def find_previous_to_block_with_property(
        self, predicate: Callable[[MemoryBlock], bool]
    ) -> Optional[MemoryBlock]:
        """The block just before the first one satisfying ``predicate``.

        None when no block satisfies it or when the first block does.
        """
        previous = self.access_first()
        if previous is None or predicate(previous):
            return None
        current = self.access_next(previous)
        while current is not None and not predicate(current):
            previous = current
            current = self.access_next(current)
        return previous if current is not None else None

    def __iter__(self) -> Iterator[Any]:
        block = self.access_first()
        while block is not None:
            yield block.data
            block = self.access_next(block)


class Network(ABC):
    """Nodes connected by undirected relations, reachable through a gate."""

    @abstractmethod
    def relation_count(self) -> int:
        """Number of relations in the network."""

    @abstractmethod
    def degree(self, node: MemoryBlock) -> int:
        """Number of relations of ``node``."""

    @abstractmethod
    def access_node_from_gate(self, order: int) -> Optional[MemoryBlock]:
        """The node at position ``order`` reachable from the gate."""

    @abstractmethod
    def access_node_from_node(self, node: MemoryBlock, order: int) -> Optional[MemoryBlock]:
        """The neighbour of ``node`` at position ``order``."""

    @abstractmethod
    def relation_exists(self, node_a: MemoryBlock, node_b: MemoryBlock) -> bool:
        """True when the two nodes are connected."""

    @abstractmethod
    def insert(self) -> MemoryBlock:
        """Add a new node."""

    @abstractmethod
    def remove(self, node: MemoryBlock) -> None:
        """Remove ``node`` and its relations."""

    @abstractmethod
    def connect(self, node_a: MemoryBlock, node_b: MemoryBlock) -> None:
        """Create a relation between the two nodes."""

    @abstractmethod
    def disconnect(self, node_a: MemoryBlock, node_b: MemoryBlock) -> None:
        """Remove the relation between the two nodes."""