"""Test fixtures for LinkedTreeLib consumers.

These fixtures provide controlled access to internal state for testing purposes
without exposing implementation details as part of the public API.
"""

from collections import deque
from typing import Any, Dict, List, Optional, Tuple

from ..core.linked_tree import LinkedTree, _TreeNode
from ..core.position import Position


def build_tree(layout: Any, tree: Optional[LinkedTree] = None) -> Tuple[LinkedTree, Dict[Any, Position]]:
    """Build a tree from a nested (element, [children...]) description.

    A bare element is shorthand for a leaf.

    Example:
        tree, pos = build_tree(("A", [("B", ["D"]), "C"]))
        assert tree.size() == 4
        assert tree.parent(pos["D"]) is pos["B"]

    Args:
        layout: Nested description of the tree
        tree: Empty tree to populate (a new LinkedTree by default)

    Returns:
        (tree, positions) where positions maps each element to its position.
        Later duplicates of an element overwrite earlier ones in the mapping.
    """
    if tree is None:
        tree = LinkedTree()
    positions: Dict[Any, Position] = {}

    element, children = _split(layout)
    root = tree.add_root(element)
    positions[element] = root

    pending = deque((root, child) for child in children)
    while pending:
        parent, child_layout = pending.popleft()
        element, children = _split(child_layout)
        position = tree.add(element, parent)
        positions[element] = position
        pending.extend((position, child) for child in children)

    return tree, positions


def _split(layout: Any) -> Tuple[Any, List[Any]]:
    if isinstance(layout, tuple) and len(layout) == 2 and isinstance(layout[1], list):
        return layout[0], layout[1]
    return layout, []


class TreeInvariantChecker:
    """Verify the structural invariants of a LinkedTree.

    Example:
        checker = TreeInvariantChecker(tree)
        tree.remove(pos["B"])
        checker.assert_consistent()
    """

    def __init__(self, tree: LinkedTree):
        self._tree = tree

    def check(self) -> List[str]:
        """Walk the tree and report every violated invariant.

        Returns:
            List of human readable problems (empty if consistent)
        """
        tree = self._tree
        problems = []
        root = tree._root

        if root is None:
            if tree.size() != 0:
                problems.append(f"empty tree reports size {tree.size()}")
            return problems

        if root._parent is not None:
            problems.append("root has a parent")

        seen = set()
        queue = deque([root])
        while queue:
            node = queue.popleft()
            if id(node) in seen:
                problems.append(f"node {node.element!r} reachable twice")
                continue
            seen.add(id(node))

            if node._owner is not tree:
                problems.append(f"node {node.element!r} is not owned by the tree")
            for child in node._children:
                if child._parent is not node:
                    problems.append(
                        f"child {child.element!r} does not point back to {node.element!r}"
                    )
                if sum(1 for c in node._children if c is child) != 1:
                    problems.append(
                        f"child {child.element!r} listed more than once under {node.element!r}"
                    )
                queue.append(child)

        if len(seen) != tree.size():
            problems.append(f"size is {tree.size()} but {len(seen)} nodes are reachable")
        return problems

    def assert_consistent(self) -> None:
        """Raise AssertionError listing every violated invariant."""
        problems = self.check()
        if problems:
            raise AssertionError("Tree invariants violated: " + "; ".join(problems))

    @staticmethod
    def is_detached(position: Position) -> bool:
        """Check whether a position no longer belongs to any tree."""
        return isinstance(position, _TreeNode) and position._owner is None
