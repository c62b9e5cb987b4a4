"""
Tests for the message entropy engine.
"""

import numpy as np
import pytest

from motifvec.core.entropy import NOISE_FLOOR, compute_entropy, shannon_entropy


CONFIG_2 = {'motif1': 0.5, 'motif2': 0.3}


class TestComputeEntropy:

    def test_uniform_four(self):
        """ln(4) scaled by ln(2 + 1)."""
        h = compute_entropy(np.array([0.25, 0.25, 0.25, 0.25]), CONFIG_2)
        assert h == pytest.approx(np.log(4) * np.log(3))
        assert h == pytest.approx(1.523, abs=1e-3)

    def test_zero_vector(self):
        assert compute_entropy(np.zeros(4), CONFIG_2) == 0.0
        assert compute_entropy(np.zeros(4), {}) == 0.0

    def test_no_motifs_no_scaling(self):
        v = np.array([1.0, 1.0])
        assert compute_entropy(v, {}) == pytest.approx(np.log(2))

    def test_single_component(self):
        assert compute_entropy(np.array([0.0, 3.0, 0.0]), CONFIG_2) == 0.0

    def test_sign_ignored(self):
        a = compute_entropy(np.array([0.6, -0.8]), CONFIG_2)
        b = compute_entropy(np.array([0.6, 0.8]), CONFIG_2)
        assert a == b

    def test_scale_invariance(self):
        rng = np.random.default_rng(0)
        for _ in range(20):
            v = rng.normal(size=12)
            k = rng.uniform(0.01, 100.0)
            assert compute_entropy(k * v, CONFIG_2) == pytest.approx(compute_entropy(v, CONFIG_2))

    def test_non_negative(self):
        rng = np.random.default_rng(1)
        for _ in range(20):
            assert compute_entropy(rng.normal(size=8), {'a': 1.0}) >= 0.0

    def test_noise_floor_not_renormalized(self):
        """Entries at or below the floor are dropped; the rest keep their mass."""
        v = np.array([1.0, 1.0, 1e-12])
        p = np.abs(v) / np.abs(v).sum()
        kept = p[p > NOISE_FLOOR]
        expected = -np.sum(kept * np.log(kept))
        assert kept.sum() < 1.0
        assert shannon_entropy(v) == expected

    def test_only_size_of_config_matters(self):
        v = np.array([0.1, 0.2, 0.7])
        assert compute_entropy(v, {'a': 0.1, 'b': 0.9}) == compute_entropy(v, {'x': 5.0, 'y': -1.0})
