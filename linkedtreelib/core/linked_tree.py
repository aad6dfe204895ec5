"""Linked tree implementation for LinkedTreeLib.

Every node keeps a list of its children, a link to its parent and a link to
the tree that currently owns it. The owner link is what makes positions safe
to hand out: a position is only accepted by the tree recorded as its owner,
and removal clears the owner of every node in the removed subtree.

LinkedTree is not thread-safe. Callers sharing a tree between threads must
serialize access themselves.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from .._common.config import TraversalStrategy, TreeConfig
from ..iterators.factory import TreeIteratorFactory, create_iterator_factory
from .exceptions import (
    DuplicateRootError,
    EmptyTreeError,
    InvalidPositionError,
    NoParentError,
)
from .position import Position
from .tree import Tree

logger = logging.getLogger(__name__)


class _TreeNode(Position):
    """Storage unit of a LinkedTree. Never exposed with its structural fields."""

    __slots__ = ('_element', '_parent', '_children', '_owner')

    def __init__(self,
                 owner: 'LinkedTree',
                 element: Any,
                 parent: Optional['_TreeNode'] = None):
        self._element = element
        self._parent = parent
        self._children: List['_TreeNode'] = []
        self._owner: Optional['LinkedTree'] = owner

    @property
    def element(self) -> Any:
        return self._element


class LinkedTree(Tree):
    """A tree where nodes can have an arbitrary number of children.

    Example:
        >>> tree = LinkedTree()
        >>> a = tree.add_root("A")
        >>> b = tree.add("B", a)
        >>> [p.element for p in tree.children(a)]
        ['B']
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to breadth-first traversal)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self._root: Optional[_TreeNode] = None
        self._size = 0
        if self.config.strategy == TraversalStrategy.CUSTOM:
            self._iterator_factory = self.config.custom_factory
        else:
            self._iterator_factory = create_iterator_factory(self.config.strategy)

    # Queries

    def size(self) -> int:
        return self._size

    def root(self) -> Position:
        if self._root is None:
            raise EmptyTreeError("The tree is empty")
        return self._root

    def parent(self, p: Position) -> Position:
        node = self._check_position(p)
        if node._parent is None:
            raise NoParentError("The node has no parent")
        return node._parent

    def children(self, p: Position) -> Tuple[Position, ...]:
        """Return a snapshot of the children of p in insertion order.

        Later mutations of the tree are not reflected in the returned tuple.
        """
        node = self._check_position(p)
        return tuple(node._children)

    def is_root(self, p: Position) -> bool:
        node = self._check_position(p)
        return node is self._root

    def is_leaf(self, p: Position) -> bool:
        node = self._check_position(p)
        return not node._children

    # Mutations

    def add_root(self, element: Any) -> Position:
        if not self.is_empty():
            raise DuplicateRootError("Tree already has a root")
        self._root = _TreeNode(self, element)
        self._size = 1
        logger.debug("Added root %r", element)
        return self._root

    def add(self, element: Any, parent: Position) -> Position:
        """Add a new node as the last child of a given position.

        Args:
            element: The element to store
            parent: Position of the parent

        Returns:
            Position of the new node

        Raises:
            InvalidPositionError: If the parent position is not valid
        """
        parent_node = self._check_position(parent)
        node = _TreeNode(self, element, parent_node)
        parent_node._children.append(node)
        self._size += 1
        return node

    def replace(self, p: Position, element: Any) -> Any:
        """Replace the element stored at a position.

        Returns:
            The element previously stored at p

        Raises:
            InvalidPositionError: If the position is not valid
        """
        node = self._check_position(p)
        previous = node._element
        node._element = element
        return previous

    def swap_elements(self, p1: Position, p2: Position) -> None:
        """Exchange the elements stored at two positions.

        Structure is untouched. Swapping a position with itself is a no-op.

        Raises:
            InvalidPositionError: If either position is not valid
        """
        node1 = self._check_position(p1)
        node2 = self._check_position(p2)
        node1._element, node2._element = node2._element, node1._element

    def remove(self, p: Position) -> None:
        """Remove a node together with its whole subtree.

        Every position in the removed subtree becomes invalid for this tree.
        Removing the root empties the tree.

        Raises:
            InvalidPositionError: If the position is not valid
        """
        node = self._check_position(p)
        removed = self._subtree_nodes(node)

        if node._parent is not None:
            node._parent._children.remove(node)
            node._parent = None
            self._size -= len(removed)
        else:
            # Root subtree is the whole tree
            self._root = None
            self._size = 0

        for detached in removed:
            detached._owner = None
        logger.debug("Removed %r and %d node(s) in total", node.element, len(removed))

    # Traversal

    def iterator(self) -> Iterator[Position]:
        return self._iterator_factory.create_iterator(self)

    def set_iterator_factory(self, factory: TreeIteratorFactory) -> None:
        """Use a different traversal strategy for future iterations.

        Iterators already created keep their own order.
        """
        if factory is None or not hasattr(factory, 'create_iterator'):
            raise ValueError(f"Not an iterator factory: {factory!r}")
        self._iterator_factory = factory
        logger.debug("Iterator factory set to %r", factory)

    @property
    def iterator_factory(self) -> TreeIteratorFactory:
        """Currently configured traversal strategy."""
        return self._iterator_factory

    # Internals

    def _check_position(self, p: Position) -> _TreeNode:
        """Validate a position, returning its node.

        Raises:
            InvalidPositionError: If p is None, not one of our nodes, or
                owned by another tree (or by none, after removal)
        """
        if p is None or not isinstance(p, _TreeNode):
            raise InvalidPositionError("The position is invalid")
        if p._owner is not self:
            raise InvalidPositionError("The node is not from this tree")
        return p

    @staticmethod
    def _subtree_nodes(node: _TreeNode) -> List[_TreeNode]:
        """Collect node and all its descendants, breadth-first.

        Independent of the configured iterator factory: removal only needs
        every node exactly once.
        """
        nodes = []
        queue: Deque[_TreeNode] = deque([node])
        while queue:
            current = queue.popleft()
            nodes.append(current)
            queue.extend(current._children)
        return nodes

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
