"""
Randomized stress tests checking the AA-tree level invariants.
"""

import random

import pytest

from aatree import AATree, DuplicateKeyError


class TestRandomizedOperations:
    """Mixed add/remove workloads checked against a dict."""

    @pytest.mark.parametrize("seed", [1, 7, 2024])
    def test_mixed_workload(self, seed, check_invariants):
        """Test invariants, count and order after every operation."""
        rng = random.Random(seed)
        tree = AATree()
        shadow = {}

        for _ in range(600):
            key = rng.randrange(200)
            if rng.random() < 0.6:
                if key in shadow:
                    with pytest.raises(DuplicateKeyError):
                        tree.add(key, -key)
                else:
                    tree.add(key, key * 2)
                    shadow[key] = key * 2
            else:
                assert tree.remove(key) == (key in shadow)
                shadow.pop(key, None)

            check_invariants(tree)
            assert tree.count == len(shadow)

        assert list(tree) == sorted(shadow.items())
        assert sum(1 for k in range(200) if tree.contains_key(k)) == tree.count

    def test_reverse_is_exact_reverse(self):
        """Test reverse traversal mirrors forward traversal."""
        rng = random.Random(99)
        keys = rng.sample(range(10_000), 500)
        tree = AATree()
        for key in keys:
            tree.add(key, str(key))

        assert list(tree.keys()) == sorted(keys)
        assert list(reversed(tree)) == list(tree)[::-1]

    def test_height_is_logarithmic(self):
        """Test ascending inserts cannot degrade into a list."""
        tree = AATree()
        for i in range(4096):
            tree.add(i, i)

        # AA-tree height is bounded by 2 * log2(n + 1)
        assert _height(tree.root) <= 2 * 13

    def test_descending_inserts_then_drain(self, check_invariants):
        """Test removing in insertion order from a descending build."""
        tree = AATree()
        for i in range(300, 0, -1):
            tree.add(i, i)
        check_invariants(tree)

        for i in range(300, 0, -3):
            assert tree.remove(i)
            check_invariants(tree)

        assert tree.count == 200


def _height(node) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))
