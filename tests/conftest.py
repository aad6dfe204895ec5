"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkedtreelib import LinkedTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large randomized trees (deselect with -m 'not slow')")


@pytest.fixture
def sample_tree():
    """Build the reference tree.

    A
    ├── B
    │   └── D
    └── C
    """
    tree = LinkedTree()
    a = tree.add_root("A")
    b = tree.add("B", a)
    c = tree.add("C", a)
    d = tree.add("D", b)
    return tree, {"A": a, "B": b, "C": c, "D": d}
