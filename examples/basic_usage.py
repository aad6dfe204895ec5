#!/usr/bin/env python3
"""
Basic LinkedTreeLib usage.

This example demonstrates:
- Building a tree through positions
- Swapping traversal strategies
- What happens to positions after a subtree is removed
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkedtreelib import (
    LinkedTree,
    InvalidPositionError,
    PostOrderIteratorFactory,
    get_tree_stats,
)


def main():
    tree = LinkedTree()
    docs = tree.add_root("docs")
    guide = tree.add("guide", docs)
    tree.add("api", docs)
    tree.add("install.md", guide)
    tree.add("usage.md", guide)

    print("Breadth-first:", [p.element for p in tree])

    tree.set_iterator_factory(PostOrderIteratorFactory())
    print("Post-order:   ", [p.element for p in tree])

    print("Stats:", get_tree_stats(tree))

    tree.remove(guide)
    print(f"After removing 'guide': {tree.size()} nodes")

    try:
        tree.add("faq.md", guide)
    except InvalidPositionError as e:
        print(f"Stale position rejected: {e}")


if __name__ == "__main__":
    main()
