"""
Timing harness for the prime sieves.

One harness driven by a table of (limit, measurement_seconds, samples)
cases. Every implementation is timed on every case.
"""

import time
import numpy as np
import pandas as pd
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from . import IMPLEMENTATIONS

Case = Tuple[int, float, int]


def parse_cases(rows: Iterable) -> List[Case]:
    """
    Validate benchmark table rows, e.g. from YAML config.

    Each row must be [limit, measurement_seconds, samples] with
    limit >= 0, measurement_seconds > 0 and samples >= 1.
    """
    cases = []
    for row in rows:
        try:
            if len(row) != 3:
                raise ValueError(f"benchmark case needs 3 fields, got {row!r}")
            limit, seconds, samples = row
            if int(limit) != limit or limit < 0:
                raise ValueError(f"bad limit in case {row!r}")
            if seconds <= 0:
                raise ValueError(f"bad measurement time in case {row!r}")
            if int(samples) != samples or samples < 1:
                raise ValueError(f"bad sample count in case {row!r}")
        except TypeError as e:
            raise ValueError(f"malformed benchmark case {row!r}") from e
        cases.append((int(limit), float(seconds), int(samples)))
    return cases


def select_implementations(names: Optional[Iterable[str]] = None) -> Dict[str, Callable]:
    """Return {name: primes_fn} for the requested names, in request order."""
    if names is None:
        return dict(IMPLEMENTATIONS)
    selected = {}
    for name in names:
        if name not in IMPLEMENTATIONS:
            raise ValueError(
                f"unknown implementation {name!r}, expected one of {list(IMPLEMENTATIONS)}"
            )
        selected[name] = IMPLEMENTATIONS[name]
    return selected


def time_primes(primes_fn: Callable, limit: int, measurement_seconds: float,
                samples: int) -> np.ndarray:
    """
    Time repeated calls of primes_fn(limit).

    Stops after `samples` calls or once `measurement_seconds` have been
    spent, whichever comes first; at least one call is always timed.

    Returns
    -------
    np.ndarray
        Per-call wall times in seconds.
    """
    times = []
    deadline = time.perf_counter() + measurement_seconds
    for _ in range(samples):
        t0 = time.perf_counter()
        # Scan the whole sequence; 0 is never prime
        any(x == 0 for x in primes_fn(limit))
        t1 = time.perf_counter()
        times.append(t1 - t0)
        if t1 >= deadline:
            break
    return np.array(times)


def bench_primes(cases: Iterable[Case],
                 implementations: Optional[Dict[str, Callable]] = None,
                 verbose: bool = False) -> pd.DataFrame:
    """
    Run every implementation on every case.

    Parameters
    ----------
    cases : iterable of (limit, measurement_seconds, samples)
        Benchmark table.
    implementations : dict, optional
        {name: primes_fn}. Defaults to all sieves.
    verbose : bool
        Print one line per measurement.

    Returns
    -------
    pd.DataFrame
        Columns: implementation, limit, samples, mean_s, median_s,
        min_s, max_s, std_s.
    """
    if implementations is None:
        implementations = dict(IMPLEMENTATIONS)

    rows = []
    for limit, seconds, samples in cases:
        for name, fn in implementations.items():
            times = time_primes(fn, limit, seconds, samples)
            rows.append({
                'implementation': name,
                'limit': limit,
                'samples': len(times),
                'mean_s': float(np.mean(times)),
                'median_s': float(np.median(times)),
                'min_s': float(np.min(times)),
                'max_s': float(np.max(times)),
                'std_s': float(np.std(times)),
            })
            if verbose:
                print(f"  {name:>10}::primes({limit:,}): "
                      f"{rows[-1]['mean_s'] * 1e6:,.1f} us "
                      f"(n={len(times)})")

    return pd.DataFrame(rows, columns=[
        'implementation', 'limit', 'samples',
        'mean_s', 'median_s', 'min_s', 'max_s', 'std_s',
    ])
