#!/usr/bin/env python3
"""
Verify all sieves against each other and against the known prime list.

Checks:
1. Boundary values (0, 1, 2, 3, 100)
2. Last element equals the limit iff the limit is prime
3. Agreement between implementations
4. Fixture cross-check over [0,10), [10,100), [100,2000), [2000,10000)

Usage:
    python -m sieves.experiments.verify_sieves
"""

import sys
import time
from typing import Callable, Dict, Optional

from .. import IMPLEMENTATIONS
from ..dataset import cross_check, last, load_prime_list

RANGES = [(0, 10), (10, 100), (100, 2_000), (2_000, 10_000)]

PRIME_LIMITS = [7901, 4013, 4409]
COMPOSITE_LIMITS = [0, 1, 10, 10_000]


def _report(ok: bool, label: str, verbose: bool):
    if verbose:
        print(f"  {label} {'✓' if ok else '✗'}")


def verify_boundaries(primes_fn: Callable, verbose: bool = True) -> bool:
    """Check the small-limit literals and primes(100)."""
    ok = True
    for limit, expected in [(0, []), (1, []), (2, [2]), (3, [2, 3])]:
        got = list(primes_fn(limit))
        good = got == expected
        _report(good, f"primes({limit}) = {got}", verbose)
        ok &= good

    ps = list(primes_fn(100))
    good = ps[:5] == [2, 3, 5, 7, 11] and len(ps) == 25 and ps[24] == 97
    _report(good, f"primes(100)[:5] = {ps[:5]}, primes(100)[24] = {ps[24] if len(ps) > 24 else None}",
            verbose)
    return ok and good


def verify_last_element(primes_fn: Callable, verbose: bool = True) -> bool:
    """Last element equals the limit exactly for prime limits."""
    ok = True
    for n in PRIME_LIMITS:
        good = last(primes_fn(n)) == n
        _report(good, f"last(primes({n})) == {n}", verbose)
        ok &= good
    for n in COMPOSITE_LIMITS:
        good = last(primes_fn(n)) != n
        _report(good, f"last(primes({n})) != {n}", verbose)
        ok &= good
    return ok


def verify_agreement(implementations: Dict[str, Callable], stop: int = 2_000,
                     verbose: bool = True) -> bool:
    """Every implementation yields the same list as the first one for limits < stop."""
    names = list(implementations)
    reference = implementations[names[0]]
    errors = 0
    for n in range(stop):
        expected = list(reference(n))
        for name in names[1:]:
            if list(implementations[name](n)) != expected:
                errors += 1
                if verbose and errors <= 10:
                    print(f"  MISMATCH at limit={n}: {names[0]} vs {name}")
    _report(errors == 0, f"agreement of {', '.join(names)} for limits < {stop:,}", verbose)
    return errors == 0


def verify_dataset(primes_fn: Callable, known, verbose: bool = True) -> bool:
    """Fixture cross-check over every range in RANGES."""
    ok = True
    for start, stop in RANGES:
        t0 = time.time()
        bad = cross_check(primes_fn, start, stop, known)
        good = not bad
        _report(good, f"[{start:,}, {stop:,}) {time.time() - t0:.2f}s"
                + ("" if good else f" first failures: {bad[:5]}"), verbose)
        ok &= good
    return ok


def verify_all(implementations: Optional[Dict[str, Callable]] = None,
               verbose: bool = True) -> bool:
    """Run every check on every implementation. Returns True if all pass."""
    if implementations is None:
        implementations = dict(IMPLEMENTATIONS)
    known = load_prime_list()

    ok = True
    for name, fn in implementations.items():
        if verbose:
            print(f"\n=== {name}::primes ===")
        ok &= verify_boundaries(fn, verbose)
        ok &= verify_last_element(fn, verbose)
        ok &= verify_dataset(fn, known, verbose)

    if len(implementations) > 1:
        if verbose:
            print("\n=== agreement ===")
        ok &= verify_agreement(implementations, verbose=verbose)

    return ok


if __name__ == '__main__':
    print("Verifying sieves...")
    passed = verify_all()
    print("\nALL CHECKS PASSED" if passed else "\nVERIFICATION FAILED")
    sys.exit(0 if passed else 1)
