"""
Visitor protocols for in-order traversal of sorted containers.
"""

from abc import ABC, abstractmethod
from typing import Any


class Visitor(ABC):
    """
    Visitor that receives each stored value in traversal order.

    The walk polls is_completed after every visit and stops as soon as it
    reports True.
    """

    @abstractmethod
    def visit(self, value: Any, state: Any) -> None:
        """
        Process a single value.

        Args:
            value: The value stored at the current node.
            state: The object passed to accept(), forwarded unchanged.
        """
        pass

    @property
    @abstractmethod
    def is_completed(self) -> bool:
        """True when the visitor wants no further visits."""
        pass


class KeyValueVisitor(ABC):
    """Visitor that receives each key together with its value."""

    @abstractmethod
    def visit(self, key: Any, value: Any, state: Any) -> None:
        """
        Process a single key-value pair.

        Args:
            key: The key stored at the current node.
            value: The value stored at the current node.
            state: The object passed to accept(), forwarded unchanged.
        """
        pass

    @property
    @abstractmethod
    def is_completed(self) -> bool:
        """True when the visitor wants no further visits."""
        pass
