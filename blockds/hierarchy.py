"""Abstract hierarchies: blocks arranged as a rooted tree of parents and sons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional


class UnavailableFunctionCall(RuntimeError):
    """Raised when a structure does not support the requested operation."""


class Hierarchy(ABC):
    """A rooted tree of blocks where every block but the root has a parent."""

    @abstractmethod
    def degree(self, node: Any) -> int:
        """Number of sons of ``node``."""

    @abstractmethod
    def access_root(self) -> Optional[Any]:
        """The root block, or None when the hierarchy is empty."""

    @abstractmethod
    def access_parent(self, node: Any) -> Optional[Any]:
        """The parent of ``node``, or None for the root."""

    @abstractmethod
    def access_son(self, node: Any, son_order: int) -> Optional[Any]:
        """The son of ``node`` at position ``son_order``, or None."""

    @abstractmethod
    def emplace_root(self) -> Any:
        """Create a new root block."""

    @abstractmethod
    def change_root(self, new_root: Optional[Any]) -> None:
        """Replace the root with ``new_root``."""

    @abstractmethod
    def emplace_son(self, parent: Any, son_order: int) -> Any:
        """Create a new son of ``parent`` at position ``son_order``."""

    @abstractmethod
    def change_son(self, parent: Any, son_order: int, new_son: Optional[Any]) -> None:
        """Replace the son of ``parent`` at ``son_order`` with ``new_son``."""

    @abstractmethod
    def remove_son(self, parent: Any, son_order: int) -> None:
        """Remove the son of ``parent`` at ``son_order`` with its whole subtree."""

    def level(self, node: Any) -> int:
        """Distance of ``node`` from the root."""
        level = 0
        parent = self.access_parent(node)
        while parent is not None:
            level += 1
            parent = self.access_parent(parent)
        return level

    def node_count(self, node: Optional[Any] = None) -> int:
        """Number of blocks in the subtree of ``node``; the whole hierarchy without one."""
        if node is None:
            node = self.access_root()
            if node is None:
                return 0
        count = 0

        def tally(_: Any) -> None:
            nonlocal count
            count += 1

        self.process_post_order(node, tally)
        return count

    def is_root(self, node: Any) -> bool:
        """True when ``node`` has no parent."""
        return self.access_parent(node) is None

    def is_nth_son(self, node: Any, son_order: int) -> bool:
        """True when ``node`` is the son at ``son_order`` of its parent."""
        parent = self.access_parent(node)
        return parent is not None and self.access_son(parent, son_order) is node

    def is_leaf(self, node: Any) -> bool:
        """True when ``node`` has no sons."""
        return self.degree(node) == 0

    def has_nth_son(self, node: Any, son_order: int) -> bool:
        """True when ``node`` has a son at ``son_order``."""
        return self.access_son(node, son_order) is not None

    def process_post_order(self, node: Optional[Any], operation: Callable[[Any], Any]) -> None:
        """Apply ``operation`` to every block of the subtree of ``node``, sons first."""
        if node is None:
            return
        stack: list[tuple[Any, Iterator[Any]]] = [(node, self._sons(node))]
        while stack:
            current, sons = stack[-1]
            son = next(sons, None)
            if son is None:
                stack.pop()
                operation(current)
            else:
                stack.append((son, self._sons(son)))

    def _sons(self, node: Any) -> Iterator[Any]:
        """Existing sons of ``node`` in order, skipping empty positions."""
        remaining = self.degree(node)
        order = 0
        while remaining > 0:
            son = self.access_son(node, order)
            if son is not None:
                remaining -= 1
                yield son
            order += 1


class BinaryHierarchy(Hierarchy):
    """A hierarchy in which every block has at most a left and a right son."""

    LEFT_SON_INDEX = 0
    RIGHT_SON_INDEX = 1