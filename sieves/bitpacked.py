"""
Bit-packed sieve over odd candidates only.

Only odd numbers >= 3 are stored, one bit each, in 32-bit words.
2 is handled outside the buffer. A set bit means composite.

Index mapping:
- index ndx → value 2*ndx + 3
- value n (odd, n >= 3) → index (n - 3) // 2
- bit ndx lives in word ndx >> 5, position ndx & 31

For n=3: index 0 ✓
For n=9: index 3 ✓
For n=25: index 11 ✓

Base primes are the odd p <= r = floor(sqrt(limit)), so there are
(r - 3) // 2 + 1 of them when r >= 3 and none otherwise. For limit < 9
there is nothing to cull: every odd candidate below 9 is prime.
"""

from typing import Iterator

import numpy as np

from .bounds import check_limit, sqrt_floor

WORD_BITS = 32
WORD_SHIFT = 5
WORD_MASK = WORD_BITS - 1
EMIT_WORDS = 256  # words unpacked at a time while producing primes


def index_to_value(ndx: int) -> int:
    """Convert candidate index to the odd number it represents."""
    return 2 * ndx + 3


def value_to_index(n: int) -> int:
    """Convert odd number n >= 3 to its candidate index."""
    if n < 3 or n % 2 == 0:
        raise ValueError(f"{n} is not an odd number >= 3")
    return (n - 3) // 2


def candidate_count(limit: int) -> int:
    """Number of odd candidates 3, 5, ..., <= limit."""
    if limit < 3:
        return 0
    return (limit - 3) // 2 + 1


def base_count(limit: int) -> int:
    """Number of odd candidates <= floor(sqrt(limit)) used for culling."""
    r = sqrt_floor(limit)
    if r < 3:
        return 0
    return (r - 3) // 2 + 1


def word_count(n_bits: int) -> int:
    """Words needed to hold n_bits bits."""
    return (n_bits + WORD_MASK) >> WORD_SHIFT


def _is_set(words: np.ndarray, ndx: int) -> bool:
    return ((int(words[ndx >> WORD_SHIFT]) >> (ndx & WORD_MASK)) & 1) == 1


def _cull(words: np.ndarray, start: int, step: int, n_bits: int) -> None:
    """Set every bit at start, start+step, ... below n_bits."""
    positions = np.arange(start, n_bits, step, dtype=np.int64)
    masks = np.left_shift(np.uint32(1), (positions & WORD_MASK).astype(np.uint32))
    # ufunc.at: several positions may share a word
    np.bitwise_or.at(words, positions >> WORD_SHIFT, masks)


def composite_words(limit: int) -> np.ndarray:
    """
    Run the sieve and return the packed composite bits.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        uint32 array of word_count(candidate_count(limit)) words.
        Bit ndx set means 2*ndx + 3 is composite.
    """
    limit = check_limit(limit)
    n_bits = candidate_count(limit)
    words = np.zeros(word_count(n_bits), dtype=np.uint32)

    for ndx in range(base_count(limit)):
        if _is_set(words, ndx):
            continue
        p = index_to_value(ndx)
        start = (p * p - 3) // 2
        # p <= sqrt(limit), so p*p is itself a candidate
        assert start < n_bits
        _cull(words, start, p, n_bits)

    return words


def unpack(words: np.ndarray, n_bits: int) -> np.ndarray:
    """Return the first n_bits bits of words as a uint8 array, bit 0 first."""
    raw = words.astype('<u4').view(np.uint8)
    return np.unpackbits(raw, bitorder='little')[:n_bits]


def primes(limit: int) -> Iterator[int]:
    """Return an iterator over all primes <= limit, ascending."""
    limit = check_limit(limit)
    if limit < 2:
        return iter(())
    if limit == 2:
        return iter((2,))

    return _emit(composite_words(limit), candidate_count(limit))


def _emit(words: np.ndarray, n_bits: int) -> Iterator[int]:
    yield 2
    # Unpack a few words at a time so the buffer never grows to a byte per bit
    for lo in range(0, words.size, EMIT_WORDS):
        first = lo << WORD_SHIFT
        bits = unpack(words[lo:lo + EMIT_WORDS], n_bits - first)
        for ndx in np.flatnonzero(bits == 0):
            yield index_to_value(first + int(ndx))
