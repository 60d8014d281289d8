"""
Visitor adapters that turn plain callables into tree visitors.
"""

from collections.abc import Callable
from typing import Any

from aatree.interfaces.visitor import KeyValueVisitor, Visitor


class _CompletionMixin:
    """Completion bookkeeping shared by the function visitors."""

    def __init__(self, limit: int | None = None) -> None:
        # Completion is polled after a visit, so a walk always visits once
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self._limit = limit
        self._visits = 0
        self._completed = False

    @property
    def visits(self) -> int:
        return self._visits

    @property
    def is_completed(self) -> bool:
        return self._completed

    def complete(self) -> None:
        """Stop the walk after the current visit."""
        self._completed = True

    def _count_visit(self) -> None:
        self._visits += 1
        if self._limit is not None and self._visits >= self._limit:
            self._completed = True


class FunctionVisitor(_CompletionMixin, Visitor):
    """
    Visitor that forwards each value to a callable.

    Args:
        fn: Called as fn(value, state) for every visited node.
        limit: Complete automatically after this many visits.
    """

    def __init__(
        self, fn: Callable[[Any, Any], None], limit: int | None = None
    ) -> None:
        if not callable(fn):
            raise TypeError(f"fn must be callable, got {type(fn).__name__}")
        super().__init__(limit)
        self._fn = fn

    def visit(self, value: Any, state: Any) -> None:
        self._fn(value, state)
        self._count_visit()


class FunctionKeyValueVisitor(_CompletionMixin, KeyValueVisitor):
    """Visitor that forwards each key-value pair to fn(key, value, state)."""

    def __init__(
        self, fn: Callable[[Any, Any, Any], None], limit: int | None = None
    ) -> None:
        if not callable(fn):
            raise TypeError(f"fn must be callable, got {type(fn).__name__}")
        super().__init__(limit)
        self._fn = fn

    def visit(self, key: Any, value: Any, state: Any) -> None:
        self._fn(key, value, state)
        self._count_visit()
