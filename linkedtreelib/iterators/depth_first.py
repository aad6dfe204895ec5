"""Depth-first traversals for LinkedTreeLib.

Both iterators use an explicit stack so deep trees do not hit the recursion
limit. Like the breadth-first iterator they are lazy, forward-only and must
not be used while the tree is being mutated.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .factory import TreeIteratorFactory

if TYPE_CHECKING:
    from ..core.position import Position
    from ..core.tree import Tree


class PreOrderIterator:
    """Depth-first pre-order iterator.

    Yields a parent before its children, children in insertion order.
    """

    def __init__(self, tree: "Tree", start: Optional["Position"] = None):
        self._tree = tree
        if start is None:
            start = tree.root()
        self._stack: List["Position"] = [start]

    def __iter__(self) -> "PreOrderIterator":
        return self

    def __next__(self) -> "Position":
        if not self._stack:
            raise StopIteration
        position = self._stack.pop()
        # Reversed so the first child is popped first
        self._stack.extend(reversed(self._tree.children(position)))
        return position


class PostOrderIterator:
    """Depth-first post-order iterator.

    Yields every child subtree before its parent. Good for teardown or for
    aggregating values bottom-up.
    """

    def __init__(self, tree: "Tree", start: Optional["Position"] = None):
        self._tree = tree
        if start is None:
            start = tree.root()
        # (position, children already expanded)
        self._stack: List[Tuple["Position", bool]] = [(start, False)]

    def __iter__(self) -> "PostOrderIterator":
        return self

    def __next__(self) -> "Position":
        while self._stack:
            position, expanded = self._stack.pop()
            if expanded:
                return position
            self._stack.append((position, True))
            for child in reversed(self._tree.children(position)):
                self._stack.append((child, False))
        raise StopIteration


class PreOrderIteratorFactory(TreeIteratorFactory):
    """Factory for depth-first pre-order iterators."""

    def create_iterator(self,
                        tree: "Tree",
                        start: Optional["Position"] = None) -> Iterator["Position"]:
        return PreOrderIterator(tree, start)


class PostOrderIteratorFactory(TreeIteratorFactory):
    """Factory for depth-first post-order iterators."""

    def create_iterator(self,
                        tree: "Tree",
                        start: Optional["Position"] = None) -> Iterator["Position"]:
        return PostOrderIterator(tree, start)
