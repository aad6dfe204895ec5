"""Breadth-first traversal for LinkedTreeLib.

Visits every position at depth N before any position at depth N+1. Within a
level, positions follow their parents' children order, and parents are
expanded in the order they were yielded.
"""

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, Optional

from .factory import TreeIteratorFactory

if TYPE_CHECKING:
    from ..core.position import Position
    from ..core.tree import Tree


class BFSIterator:
    """Level-order iterator over a tree.

    The iterator is lazy and forward-only: children are read from the tree
    when their parent is dequeued. Do not mutate the tree while an iterator is
    in flight; the resulting order is undefined.
    """

    def __init__(self, tree: "Tree", start: Optional["Position"] = None):
        """Initialize the iterator.

        Args:
            tree: Tree to traverse
            start: Starting position (defaults to the tree root)

        Raises:
            EmptyTreeError: If start is omitted and the tree is empty
        """
        self._tree = tree
        if start is None:
            start = tree.root()
        self._queue: Deque["Position"] = deque([start])

    def __iter__(self) -> "BFSIterator":
        return self

    def __next__(self) -> "Position":
        if not self._queue:
            raise StopIteration
        position = self._queue.popleft()
        self._queue.extend(self._tree.children(position))
        return position


class BFSIteratorFactory(TreeIteratorFactory):
    """Factory for breadth-first iterators. Default for every tree."""

    def create_iterator(self,
                        tree: "Tree",
                        start: Optional["Position"] = None) -> Iterator["Position"]:
        return BFSIterator(tree, start)
