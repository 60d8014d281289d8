"""
AA-tree (Anderson tree) implementation for sorted key-value storage.

A level-balanced binary search tree: every node carries an integer level
instead of a color, and two local rotations (skew and split) keep the
height at O(log N).
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from aatree.interfaces.sorted_container import SortedContainer
from aatree.interfaces.visitor import KeyValueVisitor, Visitor
from aatree.models.exceptions import (
    ArrayIndexOutOfRangeError,
    ArrayTooSmallError,
    DuplicateKeyError,
    KeyNotFoundError,
)

logger = logging.getLogger(__name__)

Comparer = Callable[[Any, Any], int]


@dataclass
class Node:
    """Node in the AA-tree. A missing child (None) has level 0."""

    key: Any
    value: Any
    level: int = 1
    left: "Node | None" = None
    right: "Node | None" = None

    def to_pair(self) -> tuple[Any, Any]:
        return (self.key, self.value)


def level_of(node: Node | None) -> int:
    return node.level if node is not None else 0


def skew(node: Node | None) -> Node | None:
    """
    Remove a left horizontal link by rotating right.

    Returns the new subtree root: the former left child when the rotation
    happened, node otherwise.
    """
    if node is None or node.left is None or node.left.level != node.level:
        return node

    left = node.left
    node.left = left.right
    left.right = node
    return left


def split(node: Node | None) -> Node | None:
    """
    Remove two consecutive right horizontal links.

    Rotates left and promotes the former right child one level. Returns the
    new subtree root, or node unchanged.
    """
    if node is None or node.right is None or node.right.right is None:
        return node
    if node.right.right.level != node.level:
        return node

    right = node.right
    node.right = right.left
    right.left = node
    right.level += 1
    return right


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class AATree(SortedContainer):
    """
    AA-tree implementation of SortedContainer.

    Properties maintained after every public operation:
    1. Leaf nodes have level 1
    2. A left child is exactly one level below its parent
    3. A right child is at the parent's level or one below
    4. No two consecutive right horizontal links
    5. Keys are unique and in-order traversal is strictly ascending

    This class is not thread-safe. Callers sharing a tree between threads
    must guard every mutating and iterating call with their own lock.
    """

    def __init__(self, comparer: Comparer | None = None) -> None:
        """
        Initialize an empty tree.

        Args:
            comparer: Callable returning a negative number, zero or a
                positive number when its first argument sorts before, equal
                to or after the second. Defaults to the keys' natural order.
        """
        if comparer is not None and not callable(comparer):
            raise TypeError(
                f"comparer must be callable, got {type(comparer).__name__}"
            )

        self._compare: Comparer = (
            comparer if comparer is not None else _default_compare
        )
        self._root: Node | None = None
        self._count: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def size(self) -> int:
        return self._count

    # Insert

    def add(self, key: Any, value: Any) -> None:
        """
        Insert a new key. O(log N)

        Raises:
            DuplicateKeyError: The key is already stored. Nothing changes.
            ValueError: The key is None.
        """
        self._check_key(key)
        try:
            self._root = self._insert(self._root, key, value, overwrite=False)
        except DuplicateKeyError:
            logger.debug(f"Rejected duplicate key {key!r}")
            raise

    def put(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        self._check_key(key)
        self._root = self._insert(self._root, key, value, overwrite=True)

    def _insert(
        self, node: Node | None, key: Any, value: Any, overwrite: bool
    ) -> Node:
        if node is None:
            self._count += 1
            return Node(key=key, value=value)

        cmp = self._compare(key, node.key)
        if cmp == 0:
            if not overwrite:
                raise DuplicateKeyError(key)
            node.value = value
            return node

        if cmp < 0:
            node.left = self._insert(node.left, key, value, overwrite)
        else:
            node.right = self._insert(node.right, key, value, overwrite)

        return split(skew(node))

    # Lookup

    def find_node(self, key: Any) -> Node:
        """
        Return the node holding key. O(log N)

        The node is live: its level and children reflect the current shape
        of the tree until the next mutation.

        Raises:
            KeyNotFoundError: The key is absent.
        """
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key. None is never stored, so it is always absent."""
        if key is None:
            return None

        current = self._root
        while current is not None:
            cmp = self._compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return None

    def __getitem__(self, key: Any) -> Any:
        return self.find_node(key).value

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Overwrite the value of an existing key in place.

        Raises:
            KeyNotFoundError: The key is absent. Use put() to insert.
        """
        self.find_node(key).value = value

    def get(self, key: Any, default: Any = None) -> Any:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        return node.value if node is not None else default

    def contains_key(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def contains_item(self, key: Any, value: Any) -> bool:
        """True if key is stored and its value equals value."""
        node = self._find_node(key)
        return node is not None and node.value == value

    @property
    def first(self) -> tuple[Any, Any] | None:
        """The pair with the smallest key, or None when empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.to_pair()

    @property
    def last(self) -> tuple[Any, Any] | None:
        """The pair with the largest key, or None when empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.to_pair()

    # Remove

    def remove(self, key: Any) -> bool:
        """
        Remove a key-value pair. O(log N)

        Returns:
            True if the key was found and removed, False otherwise.
        """
        if self._find_node(key) is None:
            return False

        self._root = self._remove(self._root, key)
        self._count -= 1
        return True

    def delete(self, key: Any) -> bool:
        return self.remove(key)

    def _remove(self, node: Node | None, key: Any) -> Node | None:
        if node is None:
            return None

        cmp = self._compare(key, node.key)
        if cmp < 0:
            node.left = self._remove(node.left, key)
        elif cmp > 0:
            node.right = self._remove(node.right, key)
        else:
            if node.right is None:
                return node.left

            # Replace with the in-order successor, then unlink the successor
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.value = successor.value
            node.right = self._remove(node.right, successor.key)

        return self._rebalance(node)

    def _rebalance(self, node: Node) -> Node:
        """Restore the level invariants on the way back up from a removal."""
        expected = min(level_of(node.left), level_of(node.right)) + 1
        if expected < node.level:
            node.level = expected
            if node.right is not None and node.right.level > expected:
                node.right.level = expected

        # Order is important
        node = skew(node)
        node.right = skew(node.right)
        if node.right is not None:
            node.right.right = skew(node.right.right)
        node = split(node)
        node.right = split(node.right)
        return node

    # Traversal

    def in_order_tree_walk(
        self, action: Callable[[Node], bool], reverse: bool = False
    ) -> bool:
        """
        Call action(node) for every node in key order.

        Args:
            action: Returns True to continue, False to stop the walk.
            reverse: Walk in descending key order.

        Returns:
            True if every node was visited, False if action stopped the walk.
        """
        for node in self._walk(reverse):
            if not action(node):
                return False
        return True

    def accept(
        self,
        visitor: Visitor | KeyValueVisitor,
        state: Any = None,
        reverse: bool = False,
    ) -> None:
        """
        Walk the tree with a visitor, threading state through unchanged.

        The walk stops once visitor.is_completed reports True.
        """
        if visitor is None:
            raise TypeError("visitor must not be None")

        if isinstance(visitor, KeyValueVisitor):

            def on_tree_walk(node: Node) -> bool:
                visitor.visit(node.key, node.value, state)
                return not visitor.is_completed

        else:

            def on_tree_walk(node: Node) -> bool:
                visitor.visit(node.value, state)
                return not visitor.is_completed

        self.in_order_tree_walk(on_tree_walk, reverse)

    def _walk(self, reverse: bool) -> Iterator[Node]:
        """Yield nodes in order using an explicit stack of ancestors."""
        stack: list[Node] = []
        node = self._root
        while True:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            if not stack:
                return
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator(reverse=True)

    def iterator(self, reverse: bool = False) -> Iterator[tuple[Any, Any]]:
        return (node.to_pair() for node in self._walk(reverse))

    def keys(self) -> Iterator[Any]:
        return (node.key for node in self._walk(False))

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._walk(False))

    # Bulk operations

    def copy_to(self, array: list, index: int = 0) -> None:
        """
        Copy the pairs in key order into array, starting at index.

        Raises:
            ArrayIndexOutOfRangeError: index < 0 or index > len(array).
            ArrayTooSmallError: Fewer than count slots remain after index.
        """
        if index < 0 or index > len(array):
            raise ArrayIndexOutOfRangeError(index, len(array))
        if len(array) - index < self._count:
            raise ArrayTooSmallError(len(array) - index, self._count)

        for offset, node in enumerate(self._walk(False)):
            array[index + offset] = node.to_pair()

    def to_list(self) -> list[tuple[Any, Any]]:
        array: list = [None] * self._count
        self.copy_to(array, 0)
        return array

    def clear(self) -> None:
        """Discard every entry. O(1)"""
        logger.debug(f"Clearing tree with {self._count} entries")
        self._root = None
        self._count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count})"

    def _check_key(self, key: Any) -> None:
        if key is None:
            raise ValueError("key must not be None")
