from __future__ import annotations
from typing import TypeVar

import traversal_collections._src as src
from traversal_collections.errors import ExhaustedIteratorError
from .abc_iterator import ContainerIterator

__all__ = ["AscendingIterator"]

Self = TypeVar("Self", bound="AscendingIterator")


class AscendingIterator(ContainerIterator):
    """Visits every element of the container from smallest to largest."""
    _index: int

    __slots__ = {
        "_index":
            "The position of the current element, or the container's length once exhausted.",
    }

    def __init__(self: Self, container: src.container.SortedIntContainer, /) -> None:
        super().__init__(container)
        self._index = 0

    def __copy__(self: Self, /) -> Self:
        result = type(self)(self.container)
        result._index = self._index
        return result

    def __key__(self: Self, /) -> int:
        return self._index

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}(index={self._index!r})"

    def _assign_state(self: Self, other: Self, /) -> None:
        self._index = other._index

    def advance(self: Self, /) -> Self:
        if self.exhausted:
            raise ExhaustedIteratorError(f"cannot advance {type(self).__name__} past the end of its container")
        self._index += 1
        return self

    def end(self: Self, /) -> Self:
        result = type(self)(self.container)
        result._index = len(result.container)
        return result

    @property
    def current(self: Self, /) -> int:
        container = self.container
        if self._index >= len(container):
            raise ExhaustedIteratorError(f"cannot dereference {type(self).__name__} at the end of its container")
        return container[self._index]

    @property
    def exhausted(self: Self, /) -> bool:
        return self._index >= len(self.container)

    @property
    def index(self: Self, /) -> int:
        return self._index
