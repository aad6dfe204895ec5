"""Traversal strategies for LinkedTreeLib.

Each strategy is a TreeIteratorFactory producing fresh iterators on demand.
"""

from .factory import TreeIteratorFactory, create_iterator_factory
from .breadth_first import BFSIterator, BFSIteratorFactory
from .depth_first import (
    PreOrderIterator,
    PreOrderIteratorFactory,
    PostOrderIterator,
    PostOrderIteratorFactory,
)

__all__ = [
    'TreeIteratorFactory',
    'create_iterator_factory',
    'BFSIterator',
    'BFSIteratorFactory',
    'PreOrderIterator',
    'PreOrderIteratorFactory',
    'PostOrderIterator',
    'PostOrderIteratorFactory',
]
