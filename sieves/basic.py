"""
Straightforward Sieve of Eratosthenes.

Reference variant: the other sieves must reproduce its output exactly.
"""

from typing import Iterator

import numpy as np

from .bounds import check_limit, sqrt_floor


def prime_flags(limit: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length limit+1.
    """
    limit = check_limit(limit)
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, sqrt_floor(limit) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes(limit: int) -> Iterator[int]:
    """
    Return an iterator over all primes <= limit, ascending.

    The sieve runs immediately; primes are produced one at a time from
    the finished buffer.
    """
    if check_limit(limit) < 2:
        return iter(())
    return _emit(prime_flags(limit))


def _emit(flags: np.ndarray) -> Iterator[int]:
    for p in np.flatnonzero(flags):
        yield int(p)
