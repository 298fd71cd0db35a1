"""
Cross-check every sieve against the known prime list in data/primes.txt.

For each n in a range, primes(n) must end with n exactly when n is
a listed prime.
"""

import pytest

from sieves import IMPLEMENTATIONS
from sieves.dataset import cross_check, last, load_prime_list, is_listed

IMPLS = pytest.mark.parametrize('primes', list(IMPLEMENTATIONS.values()),
                                ids=list(IMPLEMENTATIONS))


@pytest.fixture(scope='module')
def known():
    return load_prime_list()


class TestFixture:
    """Sanity checks on the fixture itself."""

    def test_count(self, known):
        """There are 1229 primes below 10,000."""
        assert len(known) == 1229

    def test_endpoints(self, known):
        assert known[0] == 2
        assert known[-1] == 9973

    def test_sorted_and_distinct(self, known):
        assert all(a < b for a, b in zip(known[:-1], known[1:]))

    def test_comments_and_blank_lines_ignored(self, tmp_path):
        path = tmp_path / 'primes.txt'
        path.write_text("# header\n\n7\n  \n2\n# 4\n5\n3\n")
        assert list(load_prime_list(path)) == [2, 3, 5, 7]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_prime_list(tmp_path / 'nope.txt')

    def test_is_listed(self, known):
        assert is_listed(2, known)
        assert is_listed(9973, known)
        assert not is_listed(1, known)
        assert not is_listed(10_000, known)
        assert not is_listed(20_011, known)


class TestLast:

    def test_empty(self):
        assert last(iter(())) is None

    def test_generator(self):
        assert last(x for x in [1, 2, 3]) == 3


@IMPLS
class TestLastElement:

    @pytest.mark.parametrize('n', [7901, 4013, 4409])
    def test_prime_limit_is_last(self, primes, n):
        assert last(primes(n)) == n

    @pytest.mark.parametrize('n', [0, 1, 10, 10_000])
    def test_composite_limit_is_not_last(self, primes, n):
        assert last(primes(n)) != n


@IMPLS
class TestDataset:

    def test_tiny(self, primes, known):
        assert cross_check(primes, 0, 10, known) == []

    def test_small(self, primes, known):
        assert cross_check(primes, 10, 100, known) == []

    def test_medium(self, primes, known):
        assert cross_check(primes, 100, 2_000, known) == []

    @pytest.mark.slow
    def test_large(self, primes, known):
        assert cross_check(primes, 2_000, 10_000, known) == []

    def test_full_list(self, primes, known):
        """primes(10_000) is exactly the fixture."""
        assert list(primes(10_000)) == known.tolist()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
