"""
Shared fixtures: deterministic identifiers and a stub hasher whose digest
is chosen by the test.
"""
import random

import pytest

from epoch_buckets.const import DIGEST_SPACE, IDENTIFIER_SIZE
from epoch_buckets.identifier import Identifier


@pytest.fixture
def make_addresses():
    """Factory for ``n`` reproducible random identifiers."""
    def _make(n, seed=1234):
        rng = random.Random(seed)
        return tuple(Identifier(rng.randbytes(IDENTIFIER_SIZE)) for _ in range(n))
    return _make


class PermutationHasher:
    """
    Maps identifier ``i`` of a known list straight to bucket ``i`` out of
    ``len(order)``, i.e. a perfect permutation for end-to-end checks.
    """
    name = "perm"

    def __init__(self, order, data=b""):
        self._order = order
        self._data = data

    @classmethod
    def for_addresses(cls, addresses):
        return cls({bytes(a): i for i, a in enumerate(addresses)})

    def write(self, data):
        self._data += data

    def finish(self):
        i = self._order[self._data]
        # centre of bucket i
        return (2 * i + 1) * DIGEST_SPACE // (2 * len(self._order))

    def copy(self):
        return type(self)(self._order, self._data)


@pytest.fixture
def permutation_hasher():
    return PermutationHasher
