"""
AA-tree (Anderson tree) based ordered key-value container.

This package provides a level-balanced binary search tree with:
- add(key, value) - O(log N), rejects duplicate keys
- remove(key) - O(log N), reports absence with False
- tree[key] - O(log N) strict lookup
- in_order_tree_walk(action, reverse) - early-terminating ordered walk
- accept(visitor, state, reverse) - visitor-driven ordered walk
"""

from aatree.interfaces.visitor import KeyValueVisitor, Visitor
from aatree.models.exceptions import (
    ArrayIndexOutOfRangeError,
    ArrayTooSmallError,
    DuplicateKeyError,
    KeyNotFoundError,
)
from aatree.models.sortedcontainers import AATree, Node
from aatree.models.visitors import FunctionKeyValueVisitor, FunctionVisitor

__all__ = [
    "AATree",
    "Node",
    "Visitor",
    "KeyValueVisitor",
    "FunctionVisitor",
    "FunctionKeyValueVisitor",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "ArrayIndexOutOfRangeError",
    "ArrayTooSmallError",
]
