"""Testing utilities for LinkedTreeLib consumers."""

from .fixtures import build_tree, TreeInvariantChecker

__all__ = ['build_tree', 'TreeInvariantChecker']
