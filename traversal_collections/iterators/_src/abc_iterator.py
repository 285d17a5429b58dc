from __future__ import annotations
import copy
import weakref
from abc import ABC, abstractmethod
from typing import Any, TypeVar

import traversal_collections._src as src
from traversal_collections.errors import CrossContainerError, WrongKindError
from .iterator_protocol import ContainerIteratorProtocol

__all__ = ["ContainerIterator"]

Self = TypeVar("Self", bound="ContainerIterator")


class ContainerIterator(ContainerIteratorProtocol, ABC):
    """
    Base class for cursors over a `SortedIntContainer`.

    An iterator borrows its container through a weak reference. It never
    keeps the container alive, and raises `ReferenceError` once the
    container has been garbage collected.

    Iterators compare by position, but only against iterators of the
    same concrete kind bound to the same container. Any other iterator
    raises `WrongKindError` or `CrossContainerError` rather than
    comparing unequal.

    Subclasses implement `__key__`, a position which grows with every
    advance, along with `current`, `advance`, `end`, `exhausted` and
    `_assign_state`, which backs `assign`.
    """
    _container: weakref.ref[src.container.SortedIntContainer]

    __slots__ = {
        "_container":
            "A weak reference to the borrowed container.",
    }

    def __init__(self: Self, container: src.container.SortedIntContainer, /) -> None:
        if not isinstance(container, src.container.SortedIntContainer):
            raise TypeError(f"{type(self).__name__} expected a SortedIntContainer, got {container!r}")
        self._container = weakref.ref(container)

    @abstractmethod
    def __copy__(self: Self, /) -> Self:
        raise NotImplementedError(f"__copy__ is a required method for container iterators")

    def __eq__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() == other.__key__()

    def __ge__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() >= other.__key__()

    def __gt__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() > other.__key__()

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self: Self, /) -> Self:
        return self

    @abstractmethod
    def __key__(self: Self, /) -> int:
        raise NotImplementedError(f"__key__ is a required method for container iterators")

    def __le__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() <= other.__key__()

    def __length_hint__(self: Self, /) -> int:
        return max(len(self.container) - self.__key__(), 0)

    def __lt__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() < other.__key__()

    def __ne__(self: Self, other: Any, /) -> bool:
        if not self._is_comparable(other):
            return NotImplemented
        return self.__key__() != other.__key__()

    def __next__(self: Self, /) -> int:
        if self.exhausted:
            raise StopIteration
        value = self.current
        self.advance()
        return value

    @abstractmethod
    def _assign_state(self: Self, other: Self, /) -> None:
        raise NotImplementedError(f"_assign_state is a required method for container iterators")

    def _check_compatible(self: Self, other: "ContainerIterator", /) -> None:
        if type(other) is not type(self):
            raise WrongKindError(f"{type(self).__name__} and {type(other).__name__} are different kinds of iterators")
        elif other.container is not self.container:
            raise CrossContainerError(f"the {type(self).__name__}s are bound to different containers")

    def _is_comparable(self: Self, other: Any, /) -> bool:
        if not isinstance(other, ContainerIterator):
            return False
        self._check_compatible(other)
        return True

    def assign(self: Self, other: Self, /) -> Self:
        if not isinstance(other, ContainerIterator):
            raise TypeError(f"{type(self).__name__}.assign expected a container iterator, got {other!r}")
        self._check_compatible(other)
        self._assign_state(other)
        return self

    @abstractmethod
    def advance(self: Self, /) -> Self:
        raise NotImplementedError(f"advance is a required method for container iterators")

    def begin(self: Self, /) -> Self:
        return type(self)(self.container)

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    @abstractmethod
    def end(self: Self, /) -> Self:
        raise NotImplementedError(f"end is a required method for container iterators")

    @property
    def container(self: Self, /) -> src.container.SortedIntContainer:
        container = self._container()
        if container is None:
            raise ReferenceError(f"the container of this {type(self).__name__} no longer exists")
        return container

    @property
    @abstractmethod
    def current(self: Self, /) -> int:
        raise NotImplementedError(f"current is a required property for container iterators")

    @property
    @abstractmethod
    def exhausted(self: Self, /) -> bool:
        raise NotImplementedError(f"exhausted is a required property for container iterators")
