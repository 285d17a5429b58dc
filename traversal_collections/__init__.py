"""
A sorted container of integers with three ways to walk it: in ascending
order, alternating between both ends, or over its primes only. Written
in Python 3, this library includes annotations/type-hints to make usage
with an IDE easier, and every iterator is a regular Python iterator.
"""
import logging

from . import errors
from .errors import (
    CrossContainerError,
    ElementNotFoundError,
    ExhaustedIteratorError,
    TraversalError,
    WrongKindError,
)
from .iterators import AscendingIterator, ContainerIterator, PrimeIterator, SideCrossIterator
from ._src.container import SortedIntContainer
from ._src.primes import is_prime

__all__ = [
    "AscendingIterator",
    "ContainerIterator",
    "CrossContainerError",
    "ElementNotFoundError",
    "ExhaustedIteratorError",
    "PrimeIterator",
    "SideCrossIterator",
    "SortedIntContainer",
    "TraversalError",
    "WrongKindError",
    "is_prime",
]

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
