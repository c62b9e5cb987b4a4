"""
Tests for the al-ULS JSON interface.
"""

import json

import numpy as np
import pytest

from motifvec.core.motif import MotifToken
from motifvec.core.symbolic import Expression
from motifvec.io.interface import al_uls_interface, external_payload, to_external
from motifvec.vectorizer import MessageState, initialize_vectorizer, vectorize_message


EXPECTED_KEYS = {
    'symbolic_expression',
    'vector_representation',
    'entropy_score',
    'motif_configuration',
    'metadata',
    'compressed_size',
    'information_density',
}


@pytest.fixture
def state():
    v = initialize_vectorizer(16)
    motifs = [
        MotifToken('isolation_time', {'intensity': 0.8, 'duration': 24.0}, 0.7, ['temporal', 'spatial']),
        MotifToken('decay_memory', {'decay_rate': 0.3, 'memory_strength': 0.6}, 0.6, ['cognitive', 'memory']),
    ]
    return vectorize_message(motifs, v)


class TestInterface:

    def test_schema(self, state):
        out = json.loads(al_uls_interface(state))
        assert set(out) == EXPECTED_KEYS
        assert set(out['metadata']) == {
            'num_motifs', 'compression_ratio', 'timestamp', 'compressed_size', 'information_density',
        }

    def test_round_trip(self, state):
        out = json.loads(al_uls_interface(state))
        assert out['entropy_score'] == pytest.approx(state.entropy_score)
        assert out['motif_configuration'] == pytest.approx(dict(state.motif_configuration))
        np.testing.assert_allclose(out['vector_representation'], state.vector_representation)

    def test_convenience_duplicates(self, state):
        out = json.loads(al_uls_interface(state))
        assert out['compressed_size'] == 16
        assert out['compressed_size'] == out['metadata']['compressed_size']
        assert out['information_density'] == out['metadata']['information_density']

    def test_symbolic_text(self, state):
        out = json.loads(al_uls_interface(state))
        assert out['symbolic_expression'] == '0.7τ + 0.6μ'

    def test_alias(self, state):
        assert to_external is al_uls_interface

    def test_numpy_values_serialize(self):
        md = {
            'num_motifs': np.int64(1),
            'compression_ratio': np.float64(0.8),
            'timestamp': 0.0,
            'compressed_size': 2,
            'information_density': np.float32(0.25),
        }
        state = MessageState(Expression(), [0.0, 1.0], 0.5, {'a': 1.0}, md)
        out = json.loads(al_uls_interface(state))
        assert out['metadata']['num_motifs'] == 1
        assert out['information_density'] == pytest.approx(0.25)

    def test_pure(self, state):
        a = external_payload(state)
        a['metadata']['num_motifs'] = 99
        assert state.metadata['num_motifs'] == 2
        assert al_uls_interface(state) == al_uls_interface(state)

    def test_empty_state(self):
        state = vectorize_message([], initialize_vectorizer(3))
        out = json.loads(al_uls_interface(state))
        assert out['symbolic_expression'] == '0'
        assert out['vector_representation'] == [0.0, 0.0, 0.0]
        assert out['entropy_score'] == 0.0
        assert out['motif_configuration'] == {}
