"""LinkedTreeLib - Mutable General Trees with Safe Positions.

LinkedTreeLib provides an in-memory tree whose nodes may have any number of
children. Clients work with Position handles; the tree re-validates every
handle on use, so stale or foreign positions are rejected instead of
silently corrupting the structure.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from linkedtreelib import LinkedTree

    tree = LinkedTree()
    a = tree.add_root("A")
    b = tree.add("B", a)
    [p.element for p in tree]   # breadth-first by default
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    TreeError,
    EmptyTreeError,
    InvalidPositionError,
    NoParentError,
    DuplicateRootError,
    Position,
    Tree,
    LinkedTree,
)
from .iterators import (
    TreeIteratorFactory,
    create_iterator_factory,
    BFSIterator,
    BFSIteratorFactory,
    PreOrderIterator,
    PreOrderIteratorFactory,
    PostOrderIterator,
    PostOrderIteratorFactory,
)
from ._common.config import TraversalStrategy, TreeConfig
from .api import (
    count_nodes,
    depth,
    height,
    find_positions,
    get_leaf_positions,
    elements,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'TreeError',
    'EmptyTreeError',
    'InvalidPositionError',
    'NoParentError',
    'DuplicateRootError',
    'Position',
    'Tree',
    'LinkedTree',
    # Iterators
    'TreeIteratorFactory',
    'create_iterator_factory',
    'BFSIterator',
    'BFSIteratorFactory',
    'PreOrderIterator',
    'PreOrderIteratorFactory',
    'PostOrderIterator',
    'PostOrderIteratorFactory',
    # Config
    'TraversalStrategy',
    'TreeConfig',
    # API
    'count_nodes',
    'depth',
    'height',
    'find_positions',
    'get_leaf_positions',
    'elements',
    'get_tree_stats',
]
