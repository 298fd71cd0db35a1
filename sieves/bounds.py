"""
Input checks and square-root bounds shared by all sieves.

Responsibility: edge-case arithmetic only. No sieving.
"""

import math
import operator

# Integers below this convert to float exactly
FLOAT_EXACT = 2**52


def check_limit(limit) -> int:
    """
    Validate a sieve limit and return it as a plain int.

    Raises
    ------
    TypeError
        If limit is not an integer (floats are rejected, not truncated).
    ValueError
        If limit is negative.
    """
    limit = operator.index(limit)
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return limit


def sqrt_floor(n: int) -> int:
    """
    Return floor(sqrt(n)), exact for every non-negative int.

    Below 2**52 the float square root is within one of the answer and is
    corrected until r*r <= n < (r+1)**2. Larger n go to math.isqrt.
    """
    if n < 0:
        raise ValueError(f"sqrt_floor of negative number {n}")
    if n >= FLOAT_EXACT:
        return math.isqrt(n)

    r = int(n**0.5)
    while r * r > n:
        r -= 1
    while (r + 1) * (r + 1) <= n:
        r += 1
    return r
