"""
OrderedIterable protocol for data structures that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that support ordered iteration.

    Implementations must support:
    - Ascending iteration via __iter__
    - Descending iteration via __reversed__
    - Direction-selected iteration via iterator(reverse)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in ascending order."""
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in descending order."""
        pass

    @abstractmethod
    def iterator(self, reverse: bool = False) -> Iterator[tuple[Any, Any]]:
        """
        Return a lazy iterator over key-value pairs.

        Args:
            reverse: Yield pairs in descending key order when True.

        Returns:
            Iterator yielding (key, value) tuples. The caller may stop
            consuming at any point; nothing is buffered ahead.
        """
        pass
