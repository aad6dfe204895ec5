"""High-level API for LinkedTreeLib.

Simple functional helpers for common questions about a tree. They work with
any Tree implementation and traverse in the tree's configured order unless
noted otherwise.
"""

from typing import Any, Callable, Dict, List, Optional

from .core.exceptions import NoParentError
from .core.position import Position
from .core.tree import Tree


def _traverse(tree: Tree, start: Optional[Position]):
    if start is None:
        if tree.is_empty():
            return iter(())
        return tree.iterator()
    return tree.iterator_factory.create_iterator(tree, start)


def count_nodes(tree: Tree, start: Optional[Position] = None) -> int:
    """Count the positions in the subtree rooted at start (whole tree by default).

    Example:
        >>> count_nodes(tree)
        4
    """
    return sum(1 for _ in _traverse(tree, start))


def depth(tree: Tree, p: Position) -> int:
    """Return the number of ancestors of p (0 for the root)."""
    result = 0
    current = p
    while True:
        try:
            current = tree.parent(current)
        except NoParentError:
            return result
        result += 1


def height(tree: Tree, p: Optional[Position] = None) -> int:
    """Return the length of the longest downward path from p.

    Args:
        tree: The tree
        p: Starting position (defaults to the root)

    Raises:
        EmptyTreeError: If p is omitted and the tree is empty
    """
    if p is None:
        p = tree.root()
    # Level-by-level walk; no recursion so deep trees are fine
    level = [p]
    result = -1
    while level:
        result += 1
        level = [child for position in level for child in tree.children(position)]
    return result


def find_positions(tree: Tree,
                   predicate: Callable[[Any], bool],
                   start: Optional[Position] = None) -> List[Position]:
    """Find positions whose element satisfies a predicate."""
    return [p for p in _traverse(tree, start) if predicate(p.element)]


def get_leaf_positions(tree: Tree, start: Optional[Position] = None) -> List[Position]:
    """Return all leaf positions in traversal order."""
    return [p for p in _traverse(tree, start) if tree.is_leaf(p)]


def elements(tree: Tree, start: Optional[Position] = None) -> List[Any]:
    """Return the stored elements in traversal order."""
    return [p.element for p in _traverse(tree, start)]


def get_tree_stats(tree: Tree) -> Dict[str, int]:
    """Compute summary statistics for a tree.

    Returns:
        Dictionary with total_nodes, leaf_count, internal_count, height
        and max_children. All zero for an empty tree.
    """
    stats = {
        'total_nodes': 0,
        'leaf_count': 0,
        'internal_count': 0,
        'height': 0,
        'max_children': 0,
    }
    if tree.is_empty():
        return stats

    for p in tree.iterator():
        stats['total_nodes'] += 1
        child_count = len(tree.children(p))
        if child_count:
            stats['internal_count'] += 1
        else:
            stats['leaf_count'] += 1
        stats['max_children'] = max(stats['max_children'], child_count)

    stats['height'] = height(tree)
    return stats
