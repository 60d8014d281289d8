"""
Shared pytest fixtures for AA-tree tests.
"""

import pytest

from aatree.models.sortedcontainers import AATree
from aatree.models.sortedcontainers.aa_tree import Node, level_of


def assert_aa_invariants(node: Node | None) -> None:
    """Recursively check the level invariants of the subtree at node."""
    if node is None:
        return

    assert node.level >= 1
    if node.left is None and node.right is None:
        assert node.level == 1, f"leaf {node.key!r} has level {node.level}"

    assert level_of(node.left) == node.level - 1, (
        f"left child of {node.key!r} breaks the vertical link rule"
    )
    assert level_of(node.right) in (node.level, node.level - 1), (
        f"right child of {node.key!r} has level {level_of(node.right)}"
    )
    if node.right is not None and node.right.level == node.level:
        assert level_of(node.right.right) < node.level, (
            f"two consecutive horizontal links below {node.key!r}"
        )

    assert_aa_invariants(node.left)
    assert_aa_invariants(node.right)


@pytest.fixture
def check_invariants():
    """Provide a checker that validates the whole tree."""

    def check(tree: AATree) -> None:
        assert_aa_invariants(tree.root)
        keys = list(tree.keys())
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys) == tree.count

    return check


@pytest.fixture
def tree():
    """Provide a fresh empty tree."""
    return AATree()


@pytest.fixture
def seven_key_tree():
    """Provide a tree holding keys 0..6 inserted in ascending order."""
    tree = AATree()
    for i in range(7):
        tree.add(i, i)
    return tree


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        ("key1", "value1"),
        ("key2", "value2"),
        ("key3", "value3"),
    ]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}", f"value{i}") for i in range(1000)]
