from __future__ import annotations
from typing import TypeVar

import traversal_collections._src as src
from traversal_collections.errors import ExhaustedIteratorError
from .abc_iterator import ContainerIterator

__all__ = ["SideCrossIterator"]

Self = TypeVar("Self", bound="SideCrossIterator")


class SideCrossIterator(ContainerIterator):
    """
    Alternates between the smallest and largest remaining elements.

    For a container holding a[0] <= a[1] <= ... <= a[n-1], the elements
    are visited as a[0], a[n-1], a[1], a[n-2], ... until the two cursors
    cross. Every element is visited exactly once, including the middle
    element of an odd-sized container.

    Once the cursors cross, the iterator is reset to the end state
    head_index == 0, tail_index == n, is_head == True. Since tail_index
    never exceeds n - 1 while elements remain, this state is unambiguous,
    and for an empty container it coincides with the beginning.
    """
    _head: int
    _is_head: bool
    _tail: int

    __slots__ = {
        "_head":
            "The position of the next element taken from the front.",
        "_is_head":
            "Whether the current element is taken from the front.",
        "_tail":
            "The position of the next element taken from the back.",
    }

    def __init__(self: Self, container: src.container.SortedIntContainer, /) -> None:
        super().__init__(container)
        len_ = len(container)
        self._head = 0
        # An empty container starts at its end.
        self._tail = len_ - 1 if len_ > 0 else 0
        self._is_head = True

    def __copy__(self: Self, /) -> Self:
        result = type(self)(self.container)
        result._head = self._head
        result._tail = self._tail
        result._is_head = self._is_head
        return result

    def __key__(self: Self, /) -> int:
        len_ = len(self.container)
        if self._tail >= len_:
            return len_
        return self._head + (len_ - 1 - self._tail)

    def __repr__(self: Self, /) -> str:
        return (
            f"{type(self).__name__}("
            f"head_index={self._head!r}, tail_index={self._tail!r}, is_head={self._is_head!r})"
        )

    def _assign_state(self: Self, other: Self, /) -> None:
        self._head = other._head
        self._tail = other._tail
        self._is_head = other._is_head

    def _reset_to_end(self: Self, len_: int, /) -> None:
        self._head = 0
        self._tail = len_
        self._is_head = True

    def advance(self: Self, /) -> Self:
        len_ = len(self.container)
        if self._tail >= len_:
            raise ExhaustedIteratorError(f"cannot advance {type(self).__name__} after its cursors crossed")
        if self._is_head:
            self._head += 1
        else:
            self._tail -= 1
        self._is_head = not self._is_head
        if self._tail < self._head:
            self._reset_to_end(len_)
        return self

    def end(self: Self, /) -> Self:
        result = type(self)(self.container)
        result._reset_to_end(len(result.container))
        return result

    @property
    def current(self: Self, /) -> int:
        container = self.container
        if self._tail >= len(container):
            raise ExhaustedIteratorError(f"cannot dereference {type(self).__name__} after its cursors crossed")
        elif self._is_head:
            return container[self._head]
        else:
            return container[self._tail]

    @property
    def exhausted(self: Self, /) -> bool:
        return self._tail >= len(self.container)

    @property
    def head_index(self: Self, /) -> int:
        return self._head

    @property
    def is_head(self: Self, /) -> bool:
        return self._is_head

    @property
    def tail_index(self: Self, /) -> int:
        return self._tail
