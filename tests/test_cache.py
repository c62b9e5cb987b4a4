"""
Tests for the embedding cache.
"""

import numpy as np
import pytest

from motifvec.core.cache import EmbeddingCache


class TestEmbeddingCache:

    def test_insert_lookup(self):
        cache = EmbeddingCache()
        cache.insert('a', np.array([1.0, 0.0]))
        assert 'a' in cache
        assert len(cache) == 1
        np.testing.assert_array_equal(cache.lookup('a'), [1.0, 0.0])
        assert cache.lookup('missing') is None

    def test_overwrite(self):
        cache = EmbeddingCache()
        cache.insert('a', np.array([1.0, 0.0]))
        cache.insert('a', np.array([0.0, 1.0]))
        assert len(cache) == 1
        np.testing.assert_array_equal(cache['a'], [0.0, 1.0])

    def test_stored_copy_is_read_only(self):
        source = np.array([1.0, 2.0])
        cache = EmbeddingCache()
        cache.insert('a', source)
        source[0] = 99.0
        assert cache['a'][0] == 1.0
        with pytest.raises(ValueError):
            cache['a'][0] = 5.0

    def test_iteration_order(self):
        cache = EmbeddingCache()
        for name in ['c', 'a', 'b']:
            cache.insert(name, np.zeros(2))
        assert list(cache) == ['c', 'a', 'b']
        assert cache.names() == ['c', 'a', 'b']
