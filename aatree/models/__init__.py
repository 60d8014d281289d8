"""
Data models for the sorted containers.
"""

from aatree.models.exceptions import (
    ArrayIndexOutOfRangeError,
    ArrayTooSmallError,
    DuplicateKeyError,
    KeyNotFoundError,
)
from aatree.models.visitors import FunctionKeyValueVisitor, FunctionVisitor

__all__ = [
    "ArrayIndexOutOfRangeError",
    "ArrayTooSmallError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "FunctionVisitor",
    "FunctionKeyValueVisitor",
]
