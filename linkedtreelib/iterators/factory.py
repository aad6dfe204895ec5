"""Iterator factory abstraction for LinkedTreeLib.

A tree delegates traversal to a TreeIteratorFactory. Factories are small
strategy objects: each call builds a fresh, independent iterator, so swapping
the factory on a tree never affects traversals already in progress.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional, Union

from .._common.config import TraversalStrategy

if TYPE_CHECKING:
    from ..core.position import Position
    from ..core.tree import Tree


class TreeIteratorFactory(ABC):
    """Abstract factory for tree iterators."""

    @abstractmethod
    def create_iterator(self,
                        tree: "Tree",
                        start: Optional["Position"] = None) -> Iterator["Position"]:
        """Create an iterator over a tree.

        Args:
            tree: The tree to iterate
            start: Position to start from, treated as a local root.
                Defaults to the root of the tree.

        Returns:
            Iterator yielding positions

        Raises:
            EmptyTreeError: If start is omitted and the tree is empty
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def create_iterator_factory(strategy: Union[TraversalStrategy, str]) -> TreeIteratorFactory:
    """Create an iterator factory by strategy.

    Args:
        strategy: TraversalStrategy member or name (bfs, dfs_pre, dfs_post, ...)

    Returns:
        TreeIteratorFactory instance

    Raises:
        ValueError: If the strategy is not recognized or is CUSTOM
    """
    from .breadth_first import BFSIteratorFactory
    from .depth_first import PreOrderIteratorFactory, PostOrderIteratorFactory

    strategies = {
        'bfs': BFSIteratorFactory,
        'breadth_first': BFSIteratorFactory,
        'dfs_pre': PreOrderIteratorFactory,
        'depth_first_pre': PreOrderIteratorFactory,
        'pre_order': PreOrderIteratorFactory,
        'dfs_post': PostOrderIteratorFactory,
        'depth_first_post': PostOrderIteratorFactory,
        'post_order': PostOrderIteratorFactory,
    }

    if isinstance(strategy, TraversalStrategy):
        if strategy == TraversalStrategy.CUSTOM:
            raise ValueError("CUSTOM strategy requires an explicit factory instance")
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
