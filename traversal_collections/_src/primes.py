from math import isqrt

__all__ = ["is_prime"]


def is_prime(value: int, /) -> bool:
    """
    Trial division primality test.

    Runs in O(sqrt(value)) time without a sieve, since the values held by
    a container are unbounded.
    """
    if value <= 1:
        return False
    elif value <= 3:
        return True
    elif value % 2 == 0:
        return False
    for divisor in range(3, isqrt(value) + 1, 2):
        if value % divisor == 0:
            return False
    return True
