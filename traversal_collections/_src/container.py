from __future__ import annotations
import copy
import logging
import operator
from bisect import bisect_left, bisect_right, insort_left
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional, SupportsIndex, TypeVar

from traversal_collections.errors import ElementNotFoundError
from traversal_collections.iterators import AscendingIterator, PrimeIterator, SideCrossIterator

__all__ = ["SortedIntContainer"]

Self = TypeVar("Self", bound="SortedIntContainer")

logger = logging.getLogger(__name__)


def _as_int(value: Any, /) -> int:
    if type(value) is int:
        return value
    elif isinstance(value, SupportsIndex):
        return int(operator.index(value))
    else:
        raise TypeError(f"expected an integer, got {value!r}")


class SortedIntContainer(Sequence[int]):
    """
    A container of integers which is always kept in ascending order.

    Besides ascending iteration, the container can be traversed from
    both ends at once or restricted to its prime elements::

        >>> container = SortedIntContainer([4, 1, 3, 2, 5])
        >>> list(container.iterate_side_cross())
        [1, 5, 2, 4, 3]
        >>> list(container.iterate_primes())
        [2, 3, 5]

    Iterators borrow the container without keeping it alive, and must
    not be used after the container is mutated.
    """
    _data: list[int]

    __slots__ = {
        "_data":
            "The elements in non-decreasing order.",
        "__weakref__":
            "Iterators only hold weak references to their container.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[int]] = None, /) -> None:
        if iterable is None:
            self._data = []
        elif isinstance(iterable, Iterable):
            self._data = sorted(map(_as_int, iterable))
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")

    def __contains__(self: Self, element: Any, /) -> bool:
        if not isinstance(element, SupportsIndex):
            return False
        element = _as_int(element)
        data = self._data
        i = bisect_left(data, element)
        return i < len(data) and data[i] == element

    def __copy__(self: Self, /) -> Self:
        result = type(self).__new__(type(self))
        result._data = self._data.copy()
        return result

    def __deepcopy__(self: Self, memo: dict[int, Any], /) -> Self:
        return self.__copy__()

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, SortedIntContainer):
            return self._data == other._data
        return NotImplemented

    def __getitem__(self: Self, index: int, /) -> int:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slicing, use an iterator instead")
        return self._data[index]

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self: Self, /) -> Iterator[int]:
        return iter(self._data)

    def __len__(self: Self, /) -> int:
        return len(self._data)

    def __repr__(self: Self, /) -> str:
        if len(self._data) == 0:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._data!r})"

    def __reversed__(self: Self, /) -> Iterator[int]:
        return reversed(self._data)

    def clear(self: Self, /) -> None:
        logger.debug("clearing %d elements", len(self._data))
        self._data.clear()

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    def count(self: Self, value: Any, /) -> int:
        if not isinstance(value, SupportsIndex):
            return 0
        value = _as_int(value)
        return bisect_right(self._data, value) - bisect_left(self._data, value)

    def discard(self: Self, value: int, /) -> None:
        value = _as_int(value)
        data = self._data
        i = bisect_left(data, value)
        if i < len(data) and data[i] == value:
            del data[i]
            logger.debug("removed %d at index %d", value, i)

    def extend(self: Self, iterable: Iterable[int], /) -> None:
        if not isinstance(iterable, Iterable):
            raise TypeError(f"expected iterable, got {iterable!r}")
        values = [_as_int(value) for value in iterable]
        # Small batches are inserted in place.
        if len(values) < 8:
            for value in values:
                insort_left(self._data, value)
        else:
            self._data.extend(values)
            self._data.sort()
        logger.debug("extended by %d elements", len(values))

    def index(self: Self, value: Any, start: int = 0, stop: Optional[int] = None, /) -> int:
        value = _as_int(value)
        start = operator.index(start)
        stop = len(self._data) if stop is None else operator.index(stop)
        range_ = range(len(self._data))[start:stop]
        i = bisect_left(self._data, value, range_.start, range_.stop)
        if len(range_) == 0 or i == range_.stop or self._data[i] != value:
            raise ElementNotFoundError(f"{value!r} is not in the container")
        return i

    def insert(self: Self, value: int, /) -> None:
        value = _as_int(value)
        insort_left(self._data, value)
        logger.debug("inserted %d", value)

    def iterate_ascending(self: Self, /) -> AscendingIterator:
        return AscendingIterator(self)

    def iterate_primes(self: Self, /) -> PrimeIterator:
        return PrimeIterator(self)

    def iterate_side_cross(self: Self, /) -> SideCrossIterator:
        return SideCrossIterator(self)

    def remove(self: Self, value: int, /) -> None:
        len_ = len(self._data)
        self.discard(value)
        if len(self._data) == len_:
            raise ElementNotFoundError(f"{value!r} is not in the container")

    def size(self: Self, /) -> int:
        return len(self._data)
