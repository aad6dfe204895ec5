"""Configuration classes for LinkedTreeLib.

A TreeConfig describes how a tree is set up at construction time. For now
that is the traversal strategy used by iterator() and the helpers in api.py.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..iterators.factory import TreeIteratorFactory


class TraversalStrategy(Enum):
    """Order in which a tree's positions are visited."""
    BREADTH_FIRST = "bfs"
    DEPTH_FIRST_PRE = "dfs_pre"
    DEPTH_FIRST_POST = "dfs_post"
    CUSTOM = "custom"


@dataclass
class TreeConfig:
    """Construction-time configuration for a tree.

    Attributes:
        strategy: Traversal strategy used by iterator()
        custom_factory: Factory to use when strategy is CUSTOM
    """
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    custom_factory: Optional["TreeIteratorFactory"] = None

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")
        elif self.strategy == TraversalStrategy.CUSTOM and self.custom_factory is None:
            errors.append("custom_factory is required when strategy is CUSTOM")
        elif self.strategy != TraversalStrategy.CUSTOM and self.custom_factory is not None:
            errors.append(
                f"custom_factory is only used with strategy CUSTOM, got {self.strategy.name}"
            )

        if self.custom_factory is not None and not hasattr(self.custom_factory, 'create_iterator'):
            errors.append("custom_factory must provide create_iterator()")

        return errors

    @classmethod
    def depth_first(cls) -> 'TreeConfig':
        """Configuration for pre-order depth-first traversal."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_PRE)
