from __future__ import annotations
from typing import TypeVar

import traversal_collections._src as src
from traversal_collections._src.primes import is_prime
from traversal_collections.errors import ExhaustedIteratorError
from .abc_iterator import ContainerIterator

__all__ = ["PrimeIterator"]

Self = TypeVar("Self", bound="PrimeIterator")


class PrimeIterator(ContainerIterator):
    """
    Visits the prime elements of the container in ascending order.

    Positions holding composites, 0, 1 or negative numbers are skipped
    while advancing, so the cursor only ever rests on a prime or on the
    end of the container.
    """
    _index: int

    __slots__ = {
        "_index":
            "The position of the current prime, or the container's length once exhausted.",
    }

    def __init__(self: Self, container: src.container.SortedIntContainer, /) -> None:
        super().__init__(container)
        self._index = 0
        self._skip_non_primes()

    def __copy__(self: Self, /) -> Self:
        result = type(self).__new__(type(self))
        result._container = self._container
        result._index = self._index
        return result

    def __key__(self: Self, /) -> int:
        return self._index

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}(index={self._index!r})"

    def _assign_state(self: Self, other: Self, /) -> None:
        self._index = other._index

    def _skip_non_primes(self: Self, /) -> None:
        container = self.container
        len_ = len(container)
        while self._index < len_ and not is_prime(container[self._index]):
            self._index += 1

    def advance(self: Self, /) -> Self:
        if self.exhausted:
            raise ExhaustedIteratorError(f"cannot advance {type(self).__name__} past the last prime")
        self._index += 1
        self._skip_non_primes()
        return self

    def end(self: Self, /) -> Self:
        result = self.copy()
        result._index = len(result.container)
        return result

    @property
    def current(self: Self, /) -> int:
        container = self.container
        if self._index >= len(container):
            raise ExhaustedIteratorError(f"cannot dereference {type(self).__name__} past the last prime")
        return container[self._index]

    @property
    def exhausted(self: Self, /) -> bool:
        return self._index >= len(self.container)

    @property
    def index(self: Self, /) -> int:
        return self._index
