import pytest

from traversal_collections import is_prime

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def test_small_values():
    assert [n for n in range(50) if is_prime(n)] == SMALL_PRIMES


@pytest.mark.parametrize("value", [-13, -2, -1, 0, 1])
def test_non_positive_and_one_are_not_prime(value):
    assert not is_prime(value)


@pytest.mark.parametrize("value", [4, 9, 25, 49, 121, 169, 7919 * 7919])
def test_squares_of_primes_are_composite(value):
    assert not is_prime(value)


@pytest.mark.parametrize("value", [7919, 104729, 2147483647])
def test_large_primes(value):
    assert is_prime(value)
