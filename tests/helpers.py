import numpy as np


def random_bytes(length, rng=None) -> list:
    """A list of `length` random values in 0..255."""
    rng = rng or np.random.default_rng()
    return rng.integers(0, 256, size=length, dtype=np.uint8).tolist()


def check_sorter(sorter, n, rng=None):
    """
    Run `sorter` on n random arrays whose lengths go 0, 1, ..., n-1 and
    assert every adjacent pair of each result is non-decreasing.
    """
    rng = rng or np.random.default_rng()
    for i in range(n):
        array = random_bytes(i, rng)
        sorter(array)
        for a, b in zip(array, array[1:]):
            assert a <= b, array
