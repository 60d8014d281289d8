"""
Custom exceptions for the sorted containers.
"""

from typing import Any


class DuplicateKeyError(ValueError):
    """
    Raised by add() when the key is already stored.

    The container is left exactly as it was before the call.
    """

    def __init__(self, key: Any):
        """
        Initialize duplicate key error.

        Args:
            key: The key that is already present.
        """
        self.key = key
        super().__init__(f"An item with the same key has already been added: {key!r}")


class KeyNotFoundError(KeyError):
    """Raised by strict lookups when the key is absent."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"The given key was not present in the tree: {self.key!r}"


class ArrayIndexOutOfRangeError(IndexError):
    """Raised by copy_to() when the start index lies outside the array."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index} is out of range for an array of length {length}"
        )


class ArrayTooSmallError(ValueError):
    """
    Raised by copy_to() when the destination cannot hold every entry.

    Attributes:
        available: Slots remaining from the start index.
        required: Number of entries in the container.
    """

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Destination array is not long enough: {available} slots "
            f"available from the start index, {required} required"
        )
