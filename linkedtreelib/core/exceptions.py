"""Exceptions raised by LinkedTreeLib trees."""


class TreeError(Exception):
    """Base exception for all tree errors."""
    pass


class EmptyTreeError(TreeError, LookupError):
    """Raised when the root of an empty tree is requested."""
    pass


class InvalidPositionError(TreeError, ValueError):
    """Raised when a position is missing, foreign to the tree, or stale."""
    pass


class NoParentError(TreeError, LookupError):
    """Raised when the parent of the root is requested."""
    pass


class DuplicateRootError(TreeError):
    """Raised when adding a root to a tree that already has one."""
    pass
