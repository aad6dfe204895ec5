"""Internal components shared across LinkedTreeLib.

This package must NEVER import from core or iterators at runtime to avoid
circular dependencies.
"""

from .config import TraversalStrategy, TreeConfig

__all__ = [
    'TraversalStrategy',
    'TreeConfig',
]
