"""Core tree components: positions, the tree contract and its linked implementation."""

from .exceptions import (
    TreeError,
    EmptyTreeError,
    InvalidPositionError,
    NoParentError,
    DuplicateRootError,
)
from .position import Position
from .tree import Tree
from .linked_tree import LinkedTree

__all__ = [
    'TreeError',
    'EmptyTreeError',
    'InvalidPositionError',
    'NoParentError',
    'DuplicateRootError',
    'Position',
    'Tree',
    'LinkedTree',
]
