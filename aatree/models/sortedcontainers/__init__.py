"""
Sorted container implementations.
"""

from aatree.models.sortedcontainers.aa_tree import AATree, Node, skew, split

__all__ = ["AATree", "Node", "skew", "split"]
