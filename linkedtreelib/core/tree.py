"""Tree abstraction for LinkedTreeLib.

The Tree defines the query contract every tree implementation provides.
Traversal strategies only depend on this contract, so the same iterator
factory works with any implementation.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Sequence

from .position import Position

if TYPE_CHECKING:
    from ..iterators.factory import TreeIteratorFactory


class Tree(ABC):
    """Abstract base class for trees whose nodes have any number of children.

    Every method accepting a Position validates it first and raises
    InvalidPositionError for handles that are missing, foreign to this tree
    or stale.
    """

    @abstractmethod
    def size(self) -> int:
        """Return the number of nodes in the tree."""
        pass

    def is_empty(self) -> bool:
        """Check if the tree has no nodes."""
        return self.size() == 0

    @abstractmethod
    def root(self) -> Position:
        """Return the root position.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        pass

    @abstractmethod
    def parent(self, p: Position) -> Position:
        """Return the parent of a position.

        Raises:
            InvalidPositionError: If the position is not valid
            NoParentError: If the position is the root
        """
        pass

    @abstractmethod
    def children(self, p: Position) -> Sequence[Position]:
        """Return the children of a position in insertion order.

        Raises:
            InvalidPositionError: If the position is not valid
        """
        pass

    @abstractmethod
    def is_root(self, p: Position) -> bool:
        """Check if a position is the root of the tree."""
        pass

    @abstractmethod
    def is_leaf(self, p: Position) -> bool:
        """Check if a position has no children."""
        pass

    def is_internal(self, p: Position) -> bool:
        """Check if a position has at least one child."""
        return not self.is_leaf(p)

    @abstractmethod
    def add_root(self, element: Any) -> Position:
        """Store an element as the root of an empty tree.

        Raises:
            DuplicateRootError: If the tree already has a root
        """
        pass

    @property
    @abstractmethod
    def iterator_factory(self) -> "TreeIteratorFactory":
        """Traversal strategy used by iterator()."""
        pass

    @abstractmethod
    def iterator(self) -> Iterator[Position]:
        """Return a fresh traversal over the whole tree.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        pass

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Position]:
        if self.is_empty():
            return iter(())
        return self.iterator()
