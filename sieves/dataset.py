"""
Ground-truth prime list and cross-checks against it.

Responsibility: verification only. The sieves never read the fixture.
"""

import numpy as np
from collections import deque
from pathlib import Path
from typing import Callable, Iterable, List, Optional

DEFAULT_PRIMES_PATH = Path(__file__).parent.parent / "data" / "primes.txt"


def load_prime_list(path: Optional[Path] = None) -> np.ndarray:
    """
    Load known primes from a text file, one per line.

    Blank lines and lines starting with '#' are ignored.

    Parameters
    ----------
    path : Path, optional
        Fixture file. Defaults to data/primes.txt.

    Returns
    -------
    np.ndarray
        Sorted int64 array of primes.
    """
    path = Path(path) if path is not None else DEFAULT_PRIMES_PATH
    values = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            values.append(int(line))
    return np.sort(np.array(values, dtype=np.int64))


def is_listed(n: int, known: np.ndarray) -> bool:
    """True iff n is in the sorted array known (binary search)."""
    i = np.searchsorted(known, n)
    return bool(i < len(known) and known[i] == n)


def last(values: Iterable[int]) -> Optional[int]:
    """Return the final element of an iterable, or None if it is empty."""
    tail = deque(values, maxlen=1)
    return tail[0] if tail else None


def cross_check(primes_fn: Callable, start: int, stop: int,
                known: np.ndarray) -> List[int]:
    """
    Check primes_fn against the fixture for every n in [start, stop).

    primes_fn(n) must end with n exactly when n is a listed prime.

    Returns
    -------
    list
        The n values where that does not hold (empty on success).
    """
    return [
        n for n in range(start, stop)
        if (last(primes_fn(n)) == n) != is_listed(n, known)
    ]
