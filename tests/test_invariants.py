"""Randomized mutation sequences checking tree invariants after every step."""

import random

import pytest

from linkedtreelib import LinkedTree, InvalidPositionError, count_nodes
from linkedtreelib.testing import TreeInvariantChecker


def run_random_operations(seed: int, steps: int) -> None:
    rng = random.Random(seed)
    tree = LinkedTree()
    checker = TreeInvariantChecker(tree)
    live = []
    removed = []

    for step in range(steps):
        if tree.is_empty():
            live = [tree.add_root(step)]
        else:
            op = rng.random()
            if op < 0.6:
                live.append(tree.add(step, rng.choice(live)))
            elif op < 0.75:
                p1, p2 = rng.choice(live), rng.choice(live)
                e1, e2 = p1.element, p2.element
                tree.swap_elements(p1, p2)
                assert (p1.element, p2.element) == (e2, e1)
            elif op < 0.85:
                p = rng.choice(live)
                previous = p.element
                assert tree.replace(p, -step) == previous
            else:
                victim = rng.choice(live)
                expected = tree.size() - count_nodes(tree, victim)
                tree.remove(victim)
                assert tree.size() == expected
                gone = [p for p in live if TreeInvariantChecker.is_detached(p)]
                live = [p for p in live if not TreeInvariantChecker.is_detached(p)]
                removed.extend(gone)

        checker.assert_consistent()
        assert tree.size() == len(live) == count_nodes(tree)

    for stale in removed[:20]:
        with pytest.raises(InvalidPositionError):
            tree.is_leaf(stale)


class TestRandomizedInvariants:

    @pytest.mark.parametrize("seed", range(10))
    def test_small_sequences(self, seed):
        run_random_operations(seed, steps=60)

    @pytest.mark.slow
    @pytest.mark.parametrize("seed", range(3))
    def test_large_sequences(self, seed):
        run_random_operations(seed, steps=3000)
