from typing import Protocol, TypeVar, runtime_checkable

Self = TypeVar("Self", bound="ContainerIteratorProtocol")


@runtime_checkable
class ContainerIteratorProtocol(Protocol):

    __slots__ = ()

    def __iter__(self: Self, /) -> Self: ...
    def __length_hint__(self: Self, /) -> int: ...
    def __next__(self: Self, /) -> int: ...
    def advance(self: Self, /) -> Self: ...
    def assign(self: Self, other: Self, /) -> Self: ...
    def begin(self: Self, /) -> Self: ...
    def end(self: Self, /) -> Self: ...
