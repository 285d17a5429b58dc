__all__ = [
    "CrossContainerError",
    "ElementNotFoundError",
    "ExhaustedIteratorError",
    "TraversalError",
    "WrongKindError",
]


class TraversalError(Exception):
    """Base class for the errors raised by containers and their iterators."""

    __slots__ = ()


class ElementNotFoundError(TraversalError, ValueError):
    """Raised when removing an element that is not in the container."""

    __slots__ = ()


class ExhaustedIteratorError(TraversalError, IndexError):
    """Raised when dereferencing or advancing an iterator at its end."""

    __slots__ = ()


class CrossContainerError(TraversalError, ValueError):
    """Raised when comparing iterators bound to different containers."""

    __slots__ = ()


class WrongKindError(TraversalError, TypeError):
    """Raised when comparing iterators of different kinds."""

    __slots__ = ()
