"""
Tests for the bit-packed sieve's index arithmetic and buffer layout.

Regression: the base-prime count was computed from sqrt(limit) - 3 in
unsigned arithmetic, which wraps for limit < 9 and sent the culling
loop far outside the buffer.
"""

import tracemalloc

import numpy as np
import pytest

from sieves import basic
from sieves.bitpacked import (
    EMIT_WORDS,
    WORD_BITS,
    base_count,
    candidate_count,
    composite_words,
    index_to_value,
    primes,
    unpack,
    value_to_index,
    word_count,
)


class TestIndexMapping:

    def test_round_trip(self):
        for ndx in range(50):
            assert value_to_index(index_to_value(ndx)) == ndx

    def test_known_values(self):
        assert value_to_index(3) == 0
        assert value_to_index(9) == 3
        assert value_to_index(25) == 11

    @pytest.mark.parametrize('n', [0, 1, 2, 4, 10])
    def test_rejects_even_and_small(self, n):
        with pytest.raises(ValueError):
            value_to_index(n)


class TestCounts:

    def test_candidate_count(self):
        assert candidate_count(0) == 0
        assert candidate_count(2) == 0
        assert candidate_count(3) == 1   # 3
        assert candidate_count(4) == 1   # 3
        assert candidate_count(5) == 2   # 3, 5
        assert candidate_count(100) == 49  # 3, 5, ..., 99

    def test_candidate_count_matches_odd_values(self):
        for limit in range(0, 300):
            expected = len([v for v in range(3, limit + 1, 2)])
            assert candidate_count(limit) == expected, f"limit={limit}"

    def test_base_count_small_limits(self):
        """No base primes until sqrt(limit) reaches 3."""
        for limit in range(0, 9):
            assert base_count(limit) == 0, f"limit={limit}"
        assert base_count(9) == 1     # 3
        assert base_count(24) == 1
        assert base_count(25) == 2    # 3, 5
        assert base_count(49) == 3    # 3, 5, 7

    def test_base_count_covers_sqrt(self):
        """Base candidates are exactly the odd numbers 3..floor(sqrt(limit))."""
        for limit in range(0, 2000):
            r = int(np.floor(np.sqrt(limit)))
            expected = len(range(3, r + 1, 2))
            assert base_count(limit) == expected, f"limit={limit}"

    def test_word_count(self):
        assert word_count(0) == 0
        assert word_count(1) == 1
        assert word_count(WORD_BITS) == 1
        assert word_count(WORD_BITS + 1) == 2


class TestBuffer:

    def test_dtype_and_size(self):
        for limit in [3, 64, 65, 66, 67, 1000, 10_007]:
            words = composite_words(limit)
            assert words.dtype == np.uint32
            assert words.size == word_count(candidate_count(limit))

    def test_capacity(self):
        """The last candidate always fits in the buffer."""
        for limit in range(3, 3000):
            n_bits = candidate_count(limit)
            assert (n_bits - 1) // WORD_BITS < composite_words(limit).size

    def test_no_bits_beyond_last_candidate(self):
        """Padding bits in the last word are never written."""
        for limit in range(3, 1500):
            words = composite_words(limit)
            n_bits = candidate_count(limit)
            bits = unpack(words, words.size * WORD_BITS)
            assert not bits[n_bits:].any(), f"limit={limit}"

    def test_bits_match_boolean_sieve(self):
        limit = 5000
        flags = basic.prime_flags(limit)
        bits = unpack(composite_words(limit), candidate_count(limit))
        odd_values = np.arange(3, limit + 1, 2)
        assert np.array_equal(bits == 0, flags[odd_values])

    def test_memory(self):
        """One bit per odd candidate: 1/16 of a one-byte-per-value buffer."""
        limit = 1_000_000
        words = composite_words(limit)
        assert words.nbytes * 16 <= basic.prime_flags(limit).nbytes + 16

    def test_emit_memory(self):
        """Producing primes allocates far less than one byte per candidate."""
        limit = 4_000_000
        words = composite_words(limit)
        it = primes(limit)

        tracemalloc.start()
        count = sum(1 for _ in it)
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        assert count == 283_146
        assert peak < words.nbytes // 4, f"peak {peak:,} bytes vs {words.nbytes:,} packed"

    def test_below_three_is_empty(self):
        for limit in (0, 1, 2):
            assert composite_words(limit).size == 0


class TestPrimes:

    def test_two_is_first(self):
        assert next(primes(2)) == 2
        assert next(primes(1_000)) == 2

    def test_agrees_with_basic_for_small_limits(self):
        for limit in range(0, 200):
            assert list(primes(limit)) == list(basic.primes(limit)), f"limit={limit}"

    def test_word_boundaries(self):
        """Limits whose last candidate sits at the edge of a word."""
        for k in range(1, 6):
            for limit in (64 * k + 1, 64 * k + 2, 64 * k + 3):
                assert list(primes(limit)) == list(basic.primes(limit)), f"limit={limit}"

    def test_emit_chunk_boundaries(self):
        """Limits whose last candidate sits at the edge of an unpacked chunk."""
        chunk_bits = EMIT_WORDS * WORD_BITS
        for k in (1, 2, 3):
            edge = index_to_value(k * chunk_bits)
            for limit in range(edge - 4, edge + 5):
                assert list(primes(limit)) == list(basic.primes(limit)), f"limit={limit}"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
