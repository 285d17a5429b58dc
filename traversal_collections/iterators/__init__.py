from ._src.abc_iterator import ContainerIterator
from ._src.ascending import AscendingIterator
from ._src.iterator_protocol import ContainerIteratorProtocol
from ._src.prime import PrimeIterator
from ._src.side_cross import SideCrossIterator

__all__ = [
    "AscendingIterator",
    "ContainerIterator",
    "ContainerIteratorProtocol",
    "PrimeIterator",
    "SideCrossIterator",
]
