"""
Abstract base classes for ordered containers and their visitors.
"""

from aatree.interfaces.ordered_iterable import OrderedIterable
from aatree.interfaces.sorted_container import SortedContainer
from aatree.interfaces.visitor import KeyValueVisitor, Visitor

__all__ = ["OrderedIterable", "SortedContainer", "Visitor", "KeyValueVisitor"]
