"""
Sieve of Eratosthenes, three ways.

Every implementation exposes ``primes(limit)`` returning an ascending,
single-pass iterator over all primes <= limit.
"""

from . import basic, bitpacked, functional

# Benchmark order
IMPLEMENTATIONS = {
    'functional': functional.primes,
    'basic': basic.primes,
    'bitpacked': bitpacked.primes,
}
