"""
Sieve of Eratosthenes as a fold over strided views.

Same algorithm as basic, but marking is driven by numpy views with
stride i instead of arithmetic on indices. The walk for i starts at i
itself, not i*i: the first element is only inspected, never cleared.
"""

from functools import reduce
from typing import Iterator

import numpy as np

from .bounds import check_limit, sqrt_floor

OFFSET = 2  # buffer[0] is the value 2


def _strike(sieve: np.ndarray, i: int) -> np.ndarray:
    stride = sieve[i - OFFSET::i]
    if stride[0]:
        stride[1:] = False
    return sieve


def primes(limit: int) -> Iterator[int]:
    """Return an iterator over all primes <= limit, ascending."""
    limit = check_limit(limit)
    if limit < OFFSET:
        return iter(())

    sieve = reduce(
        _strike,
        range(OFFSET, sqrt_floor(limit) + 1),
        np.ones(limit + 1 - OFFSET, dtype=bool),
    )
    return (int(e) + OFFSET for e in np.flatnonzero(sieve))
